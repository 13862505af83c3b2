import factory
from factory.django import DjangoModelFactory

from community.users.models import User


class UserFactory(DjangoModelFactory):
    username = factory.Sequence(lambda n: f"gopher{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    password = factory.django.Password("testpass123")
    is_active = True

    class Meta:
        model = User
        django_get_or_create = ["username"]
