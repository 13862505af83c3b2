"""
Tests for the open source projects pages.
"""

from unittest import mock

import pytest

from community.core.exceptions import NotOwnerError
from community.core.models import ObjectType
from community.interactions.models import Favorite
from community.interactions.models import Like
from community.interactions.models import LikeFlag
from community.interactions.models import ViewRecord
from community.interactions.services import views_counter
from community.projects.models import OpenProject
from community.projects.services import project_service
from community.projects.tests.factories import OpenProjectFactory


@pytest.mark.django_db
class TestReadList:
    """Tests for GET /projects."""

    def test_empty_first_page_renders(self, client):
        response = client.get("/projects")

        assert response.status_code == 200
        assert list(response.context["projects"]) == []
        assert "projects/list.html" in [t.name for t in response.templates]

    def test_empty_page_with_cursor_redirects(self, client):
        response = client.get("/projects", {"lastid": 50})

        assert response.status_code == 303
        assert response["Location"] == "/projects"

    def test_invalid_cursor_is_first_page(self, client):
        OpenProjectFactory()

        response = client.get("/projects", {"lastid": "abc"})

        assert response.status_code == 200
        assert len(response.context["projects"]) == 1

    def test_fetches_page_size_plus_five(self, client):
        with mock.patch.object(project_service, "find_by", wraps=project_service.find_by) as find_by:
            client.get("/projects", {"lastid": 0})

        find_by.assert_called_once_with(25, 0)

    def test_more_than_a_page_has_next(self, client):
        projects = OpenProjectFactory.create_batch(23)

        response = client.get("/projects")

        assert response.status_code == 200
        displayed = response.context["projects"]
        assert len(displayed) == 20
        page = response.context["page"]
        assert page["has_next"] is True
        assert page["next_id"] == displayed[-1].id
        assert page["next_id"] == projects[3].id
        assert page["has_prev"] is False

    def test_last_page(self, client):
        projects = OpenProjectFactory.create_batch(23)

        response = client.get("/projects", {"lastid": projects[3].id})

        displayed = response.context["projects"]
        assert [p.id for p in displayed] == [projects[2].id, projects[1].id, projects[0].id]
        page = response.context["page"]
        assert page["has_next"] is False
        assert page["next_id"] == projects[0].id
        assert page["has_prev"] is True
        assert page["prev_id"] == projects[3].id + 20

    def test_like_flags_for_logged_in_viewer(self, user_client, user):
        liked, other = OpenProjectFactory.create_batch(2)
        Like.objects.create(user=user, objid=liked.id, objtype=ObjectType.PROJECT, flag=LikeFlag.LIKE)

        response = user_client.get("/projects")

        assert response.context["likeflags"] == {liked.id: LikeFlag.LIKE}

    def test_no_like_flags_for_anonymous(self, client):
        OpenProjectFactory()

        response = client.get("/projects")

        assert response.context["likeflags"] is None


def form_data(**overrides):
    data = {
        "name": "Gin",
        "uri": "gin",
        "home": "https://gin-gonic.com",
        "desc": "HTTP web framework",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCreate:
    """Tests for GET|POST /project/new."""

    def test_requires_login(self, client):
        response = client.get("/project/new")

        assert response.status_code in (401, 403)

    def test_get_renders_empty_form(self, user_client):
        response = user_client.get("/project/new")

        assert response.status_code == 200
        assert response.context["project"].pk is None

    def test_post_without_name_renders_form(self, user_client):
        response = user_client.post("/project/new", form_data(name=""))

        assert response.status_code == 200
        assert "projects/new.html" in [t.name for t in response.templates]
        assert not OpenProject.objects.exists()

    def test_post_publishes(self, user_client, user):
        response = user_client.post("/project/new", form_data())

        assert response.status_code == 200
        assert response.json() == {"errno": 0, "msg": "ok", "data": None}
        project = OpenProject.objects.get(uri="gin")
        assert project.user == user

    def test_post_ignores_id(self, user_client, other_user):
        existing = OpenProjectFactory(user=other_user, uri="echo")

        response = user_client.post("/project/new", form_data(id=existing.id))

        assert response.json()["errno"] == 0
        existing.refresh_from_db()
        assert existing.name != "Gin"

    def test_failure_is_generic(self, user_client):
        OpenProjectFactory(uri="gin")

        response = user_client.post("/project/new", form_data())

        assert response.status_code == 200
        assert response.json()["errno"] == 1
        assert response.json()["msg"] == "Internal server error!"

    def test_sensitive_words_rejected(self, user_client):
        response = user_client.post("/project/new", form_data(desc="forbiddenword inside"))

        assert response.status_code == 403
        assert not OpenProject.objects.exists()


@pytest.mark.django_db
class TestModify:
    """Tests for GET|POST /project/modify."""

    @pytest.mark.parametrize("method", ["get", "post"])
    def test_zero_id_redirects(self, user_client, method):
        response = getattr(user_client, method)("/project/modify", {"id": 0})

        assert response.status_code == 303
        assert response["Location"] == "/projects"

    def test_missing_id_redirects(self, user_client):
        response = user_client.get("/project/modify")

        assert response.status_code == 303

    def test_get_renders_filled_form(self, user_client, user):
        project = OpenProjectFactory(user=user)

        response = user_client.get("/project/modify", {"id": project.id})

        assert response.status_code == 200
        assert response.context["project"] == project

    def test_get_unknown_project_redirects(self, user_client):
        response = user_client.get("/project/modify", {"id": 999})

        assert response.status_code == 303

    def test_owner_post_updates(self, user_client, user):
        project = OpenProjectFactory(user=user, uri="gin")

        response = user_client.post("/project/modify", form_data(id=project.id, name="Gin Gonic"))

        assert response.json()["errno"] == 0
        project.refresh_from_db()
        assert project.name == "Gin Gonic"

    def test_not_owner_is_forbidden(self, user_client, other_user):
        project = OpenProjectFactory(user=other_user, uri="gin")

        response = user_client.post("/project/modify", form_data(id=project.id, name="Hijacked"))

        assert response.status_code == 403
        assert response.content.decode() == "You do not have permission."
        project.refresh_from_db()
        assert project.name != "Hijacked"

    def test_not_authorized_from_service_is_forbidden(self, user_client):
        with mock.patch.object(project_service, "publish", side_effect=NotOwnerError()):
            response = user_client.post("/project/modify", form_data(id=1))

        assert response.status_code == 403

    def test_other_failures_are_generic(self, user_client, user):
        project = OpenProjectFactory(user=user, uri="gin")

        response = user_client.post("/project/modify", form_data(id=project.id, uri="bad uri"))

        assert response.status_code == 200
        assert response.json()["errno"] == 1


@pytest.mark.django_db
class TestDetail:
    """Tests for GET /p/<uri>."""

    def test_missing_project_redirects(self, client):
        response = client.get("/p/nope")

        assert response.status_code == 303
        assert response["Location"] == "/projects"

    def test_anonymous_view(self, client):
        project = OpenProjectFactory(uri="gin", viewnum=7)

        response = client.get("/p/gin")

        assert response.status_code == 200
        assert response.context["project"].viewnum == 8
        assert "likeflag" not in response.context
        assert "view_user_num" not in response.context
        assert views_counter.pending(ObjectType.PROJECT, project.id) == 1
        assert not ViewRecord.objects.exists()

    def test_member_view(self, user_client, user, other_user):
        project = OpenProjectFactory(uri="gin", user=other_user)
        Like.objects.create(user=user, objid=project.id, objtype=ObjectType.PROJECT)
        Favorite.objects.create(user=user, objid=project.id, objtype=ObjectType.PROJECT)

        response = user_client.get("/p/gin")

        assert response.status_code == 200
        assert response.context["likeflag"] == LikeFlag.LIKE
        assert response.context["hadcollect"] is True
        assert "view_user_num" not in response.context
        assert ViewRecord.objects.filter(user=user, objid=project.id).exists()

    def test_owner_sees_analytics_and_is_not_recorded(self, user_client, user):
        project = OpenProjectFactory(uri="gin", user=user)

        response = user_client.get("/p/gin")

        assert response.context["view_user_num"] == 0
        assert response.context["view_source"] is None
        assert not ViewRecord.objects.filter(objid=project.id).exists()

    def test_root_sees_analytics(self, client, root_user, user):
        project = OpenProjectFactory(uri="gin", user=user)
        ViewRecord.objects.create(user=user, objid=project.id, objtype=ObjectType.PROJECT)
        client.force_login(root_user)

        response = client.get("/p/gin", HTTP_REFERER="https://www.google.com/search?q=gin")

        assert response.context["view_user_num"] == 2
        assert response.context["view_source"].google == 1

    def test_view_record_is_dispatched_without_waiting(self, user_client, other_user):
        project = OpenProjectFactory(uri="gin", user=other_user)

        with mock.patch("community.projects.api.projects.dispatch_view_record") as dispatch:
            user_client.get("/p/gin")

        dispatch.assert_called_once_with(project.id, ObjectType.PROJECT, mock.ANY)

    def test_repeated_views_count_once(self, client):
        project = OpenProjectFactory(uri="gin")

        client.get("/p/gin")
        client.get("/p/gin")

        assert views_counter.pending(ObjectType.PROJECT, project.id) == 1


@pytest.mark.django_db
class TestCheckExist:
    """Tests for GET /project/uri."""

    def test_empty_uri_is_true(self, client):
        response = client.get("/project/uri")

        assert response.status_code == 200
        assert response.json() == "true"

    def test_existing_uri_is_false(self, client):
        OpenProjectFactory(uri="gin")

        response = client.get("/project/uri", {"uri": "gin"})

        assert response.json() == "false"

    def test_free_uri_is_true(self, client):
        response = client.get("/project/uri", {"uri": "gin"})

        assert response.json() == "true"
