"""
Open source projects controller.

Pages are rendered server side; form submissions answer with the JSON
envelope of ``community.core.schemas``.
"""

import logging

from django.db import DatabaseError
from django.http import HttpRequest
from django.http import HttpResponse
from django.shortcuts import render
from django.urls import reverse
from django.utils.translation import gettext as _
from ninja_extra import api_controller
from ninja_extra import http_generic
from ninja_extra import http_get

from community.core.api import BaseAPI
from community.core.api import IsAuthenticated
from community.core.api import NoSensitiveWords
from community.core.api import SessionAuth
from community.core.exceptions import APIException
from community.core.exceptions import NotOwnerError
from community.core.http import HttpResponseSeeOther
from community.core.models import ObjectType
from community.core.pagination import PREFETCH_EXTRA
from community.core.pagination import paginate_by_cursor
from community.core.schemas import EnvelopeSchema
from community.core.schemas import fail
from community.core.schemas import success
from community.core.utils import must_int
from community.interactions.services import comment_service
from community.interactions.services import favorite_service
from community.interactions.services import like_service
from community.interactions.services import view_record_service
from community.interactions.services import view_source_service
from community.interactions.services import views_counter
from community.interactions.tasks import dispatch_view_record
from community.projects.models import OpenProject
from community.projects.services import project_service

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


def redirect_to_list() -> HttpResponseSeeOther:
    return HttpResponseSeeOther(reverse("community:project_list"))


@api_controller("", tags=["Projects"])
class ProjectController(BaseAPI):
    """Pages of the open source projects section."""

    @http_get("/projects", url_name="project_list")
    def read_list(self, request: HttpRequest):
        """
        Project list, newest first, paginated with the ``lastid`` cursor.

        A stale cursor (nothing left below it) sends the visitor back to
        the first page.
        """
        last_id = must_int(request.GET.get("lastid"))
        projects = project_service.find_by(PAGE_SIZE + PREFETCH_EXTRA, last_id)

        if not projects:
            if last_id == 0:
                return render(request, "projects/list.html", {"projects": projects, "activeProjects": "active"})
            return redirect_to_list()

        projects, page = paginate_by_cursor(projects, last_id, PAGE_SIZE)

        like_flags = None
        if request.user.is_authenticated:
            like_flags = like_service.find_user_like_objects(
                request.user.pk,
                ObjectType.PROJECT,
                projects[0].id,
                page.next_id,
            )

        return render(
            request,
            "projects/list.html",
            {
                "projects": projects,
                "activeProjects": "active",
                "page": page.as_dict(),
                "likeflags": like_flags,
            },
        )

    @http_generic(
        "/project/new",
        methods=["GET", "POST"],
        response={200: EnvelopeSchema},
        url_name="project_new",
        auth=SessionAuth(),
        permissions=[IsAuthenticated, NoSensitiveWords],
    )
    def create(self, request: HttpRequest):
        """Submission form (GET) and submission (POST)."""
        name = request.POST.get("name", "")
        if request.method != "POST" or not name:
            return render(request, "projects/new.html", {"project": OpenProject(), "activeProjects": "active"})

        form = request.POST.copy()
        form.pop("id", None)
        try:
            project_service.publish(request.user, form)
        except APIException as e:
            logger.warning("Project submission by user %s rejected: %s", request.user.pk, e.message)
            return fail(1, _("Internal server error!"))
        except DatabaseError:
            logger.exception("Failed to publish project for user %s", request.user.pk)
            return fail(1, _("Internal server error!"))
        return success()

    @http_generic(
        "/project/modify",
        methods=["GET", "POST"],
        response={200: EnvelopeSchema},
        url_name="project_modify",
        auth=SessionAuth(),
        permissions=[IsAuthenticated, NoSensitiveWords],
    )
    def modify(self, request: HttpRequest):
        """Edit form (GET) and update (POST) of the project given by ``id``."""
        project_id = must_int(request.POST.get("id") or request.GET.get("id"))
        if project_id <= 0:
            return redirect_to_list()

        if request.method != "POST":
            project = project_service.find_one(project_id)
            if project is None:
                return redirect_to_list()
            return render(request, "projects/new.html", {"project": project, "activeProjects": "active"})

        form = request.POST.copy()
        form["id"] = str(project_id)
        try:
            project_service.publish(request.user, form)
        except NotOwnerError as e:
            return HttpResponse(_("You do not have permission."), status=e.status_code, content_type="text/plain; charset=utf-8")
        except APIException as e:
            logger.warning("Update of project %s by user %s rejected: %s", project_id, request.user.pk, e.message)
            return fail(1, _("Internal server error!"))
        except DatabaseError:
            logger.exception("Failed to modify project %s for user %s", project_id, request.user.pk)
            return fail(1, _("Internal server error!"))
        return success()

    @http_get("/p/{uri}", url_name="project_detail")
    def detail(self, request: HttpRequest, uri: str):
        project = project_service.find_one(uri)
        if project is None or not project.id:
            return redirect_to_list()

        data = {
            "activeProjects": "active",
            "project": project,
        }

        user = request.user
        if user.is_authenticated:
            data["likeflag"] = like_service.had_like(user.pk, project.id, ObjectType.PROJECT)
            data["hadcollect"] = favorite_service.had_favorite(user.pk, project.id, ObjectType.PROJECT)

            views_counter.incr(request, ObjectType.PROJECT, project.id, user.pk)

            is_owner = user.pk == project.user_id
            if not is_owner:
                dispatch_view_record(project.id, ObjectType.PROJECT, user.pk)

            if user.is_root or is_owner:
                data["view_user_num"] = view_record_service.find_user_num(project.id, ObjectType.PROJECT)
                data["view_source"] = view_source_service.find_one(project.id, ObjectType.PROJECT)
        else:
            views_counter.incr(request, ObjectType.PROJECT, project.id)

        # Show this visit right away; the buffered counter reaches the database later.
        project.viewnum += 1

        data["comments"] = comment_service.find_objects(project.id, ObjectType.PROJECT)
        return render(request, "projects/detail.html", data)

    @http_get("/project/uri", response={200: str}, url_name="project_uri_check")
    def check_exist(self, request: HttpRequest):
        """
        Remote validator of the ``uri`` form field.

        The answer is inverted with respect to the name: ``"true"`` means no
        project uses the uri (the field is valid), ``"false"`` means it is
        taken. Form scripts in the wild depend on this wording.
        """
        uri = request.GET.get("uri", "")
        if not uri:
            return 200, "true"

        if project_service.uri_exists(uri):
            return 200, "false"
        return 200, "true"
