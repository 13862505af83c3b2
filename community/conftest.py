import pytest
from django.core.cache import cache

from community.users.tests.factories import UserFactory


@pytest.fixture(autouse=True)
def _clear_cache():
    """View counters and dedupe markers live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    """Create a regular member."""
    return UserFactory(username="gopher")


@pytest.fixture
def other_user(db):
    """Create another regular member."""
    return UserFactory(username="rustacean")


@pytest.fixture
def root_user(db):
    """Create a site administrator."""
    return UserFactory(username="root", is_superuser=True, is_staff=True)


@pytest.fixture
def user_client(client, user):
    """Return a client logged in as user."""
    client.force_login(user)
    return client
