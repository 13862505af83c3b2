"""
Tests for the project service layer.
"""

import pytest

from community.core.exceptions import AlreadyExistsError
from community.core.exceptions import NotFoundError
from community.core.exceptions import NotOwnerError
from community.core.exceptions import ValidationError
from community.projects.models import OpenProject
from community.projects.models import ProjectStatus
from community.projects.services import project_service
from community.projects.tests.factories import OpenProjectFactory


@pytest.mark.django_db
class TestFindBy:
    def test_newest_first_and_limited(self):
        projects = OpenProjectFactory.create_batch(5)

        found = project_service.find_by(3)

        assert [p.id for p in found] == [p.id for p in reversed(projects)][:3]

    def test_below_cursor(self):
        projects = OpenProjectFactory.create_batch(5)
        cursor = projects[3].id

        found = project_service.find_by(10, cursor)

        assert [p.id for p in found] == [projects[2].id, projects[1].id, projects[0].id]

    def test_offline_projects_are_hidden(self):
        visible = OpenProjectFactory(status=ProjectStatus.NEW)
        OpenProjectFactory(status=ProjectStatus.OFFLINE)

        assert project_service.find_by(10) == [visible]


@pytest.mark.django_db
class TestFindOne:
    def test_by_id(self):
        project = OpenProjectFactory()

        assert project_service.find_one(project.id) == project

    def test_by_uri(self):
        project = OpenProjectFactory(uri="gin")

        assert project_service.find_one("gin") == project

    def test_numeric_uri_is_looked_up_as_uri(self):
        project = OpenProjectFactory(uri="2048")

        assert project_service.find_one("2048") == project

    def test_missing(self):
        assert project_service.find_one("nope") is None
        assert project_service.find_one(999) is None


@pytest.mark.django_db
class TestUriExists:
    def test_exists(self):
        OpenProjectFactory(uri="beego")

        assert project_service.uri_exists("beego") is True
        assert project_service.uri_exists("echo") is False


def publish_form(**overrides):
    form = {
        "name": "Gin",
        "uri": "gin",
        "category": "Web framework",
        "home": "https://gin-gonic.com",
        "src": "https://github.com/gin-gonic/gin",
        "desc": "HTTP web framework",
        "licence": "MIT",
    }
    form.update(overrides)
    return form


@pytest.mark.django_db
class TestPublishCreate:
    def test_creates_project_for_user(self, user):
        project = project_service.publish(user, publish_form())

        assert project.pk is not None
        assert project.user == user
        assert project.name == "Gin"
        assert project.status == ProjectStatus.NEW

    def test_root_publishes_online(self, root_user):
        project = project_service.publish(root_user, publish_form())

        assert project.status == ProjectStatus.ONLINE

    def test_default_logo(self, user, settings):
        settings.PROJECT_DEFAULT_LOGO = "/static/img/go.png"

        project = project_service.publish(user, publish_form(logo=""))

        assert project.logo == "/static/img/go.png"

    def test_non_http_links_are_dropped(self, user):
        project = project_service.publish(user, publish_form(doc="javascript:alert(1)", home="gin-gonic.com"))

        assert project.doc == ""
        assert project.home == ""

    def test_taken_uri(self, user):
        OpenProjectFactory(uri="gin")

        with pytest.raises(AlreadyExistsError):
            project_service.publish(user, publish_form())

    def test_missing_name(self, user):
        with pytest.raises(ValidationError):
            project_service.publish(user, publish_form(name=""))

    def test_invalid_uri(self, user):
        with pytest.raises(ValidationError):
            project_service.publish(user, publish_form(uri="not a slug"))

        assert not OpenProject.objects.exists()


@pytest.mark.django_db
class TestPublishModify:
    def test_owner_can_modify(self, user):
        project = OpenProjectFactory(user=user, uri="gin")

        project_service.publish(user, publish_form(id=str(project.id), name="Gin Gonic"))

        project.refresh_from_db()
        assert project.name == "Gin Gonic"

    def test_root_can_modify(self, user, root_user):
        project = OpenProjectFactory(user=user, uri="gin")

        project_service.publish(root_user, publish_form(id=project.id, desc="edited"))

        project.refresh_from_db()
        assert project.desc == "edited"
        assert project.user == user

    def test_other_user_cannot_modify(self, user, other_user):
        project = OpenProjectFactory(user=user, uri="gin")

        with pytest.raises(NotOwnerError):
            project_service.publish(other_user, publish_form(id=project.id, name="Hijacked"))

        project.refresh_from_db()
        assert project.name != "Hijacked"

    def test_missing_project(self, user):
        with pytest.raises(NotFoundError):
            project_service.publish(user, publish_form(id=999))

    def test_cannot_take_another_projects_uri(self, user):
        OpenProjectFactory(uri="echo")
        project = OpenProjectFactory(user=user, uri="gin")

        with pytest.raises(AlreadyExistsError):
            project_service.publish(user, publish_form(id=project.id, uri="echo"))

    def test_keeping_own_uri_is_fine(self, user):
        project = OpenProjectFactory(user=user, uri="gin")

        project_service.publish(user, publish_form(id=project.id, uri="gin", licence="Apache-2.0"))

        project.refresh_from_db()
        assert project.licence == "Apache-2.0"
