"""
Business logic of the open source projects section.

Controllers call these services and never touch the ORM directly. Failures
are reported with ``community.core.exceptions`` exceptions.
"""

import logging

import pydantic
from django.conf import settings
from django.db import IntegrityError
from django.db import transaction

from community.core.exceptions import AlreadyExistsError
from community.core.exceptions import NotFoundError
from community.core.exceptions import NotOwnerError
from community.core.exceptions import ValidationError
from community.projects.models import VISIBLE_STATUSES
from community.projects.models import OpenProject
from community.projects.models import ProjectStatus
from community.projects.schemas import ProjectPublishSchema

logger = logging.getLogger(__name__)


class ProjectService:
    def find_by(self, limit: int, last_id: int = 0) -> list[OpenProject]:
        """Visible projects below the ``last_id`` cursor, newest first."""
        queryset = OpenProject.objects.filter(status__in=VISIBLE_STATUSES)
        if last_id > 0:
            queryset = queryset.filter(id__lt=last_id)
        return list(queryset.select_related("user").order_by("-id")[:limit])

    def find_one(self, id_or_uri: int | str) -> OpenProject | None:
        """Look a project up by primary key (int) or by uri (str)."""
        if isinstance(id_or_uri, int):
            lookup = {"id": id_or_uri}
        else:
            lookup = {"uri": id_or_uri}
        return OpenProject.objects.select_related("user").filter(**lookup).first()

    def uri_exists(self, uri: str) -> bool:
        return OpenProject.objects.filter(uri=uri).exists()

    def publish(self, user, form) -> OpenProject:
        """
        Create or update a project from submitted form values.

        ``form`` is a QueryDict or a plain mapping. With an ``id`` the
        matching project is updated, which only its owner or a root user may
        do; without one a new project is created for ``user``.

        Raises:
            ValidationError: the form is invalid
            NotFoundError: ``id`` does not match a project
            NotOwnerError: ``user`` may not edit the project
            AlreadyExistsError: ``uri`` is taken by another project
        """
        data = form.dict() if hasattr(form, "dict") else dict(form)
        try:
            payload = ProjectPublishSchema.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(details={"errors": e.errors(include_url=False, include_context=False)}) from e

        fields = payload.model_fields_for_save()
        if not fields["logo"]:
            fields["logo"] = settings.PROJECT_DEFAULT_LOGO

        try:
            with transaction.atomic():
                if payload.id is None:
                    project = self._create(user, fields)
                else:
                    project = self._modify(user, payload.id, fields)
        except IntegrityError as e:
            raise AlreadyExistsError("This uri is already taken.") from e

        return project

    def _create(self, user, fields: dict) -> OpenProject:
        if self.uri_exists(fields["uri"]):
            raise AlreadyExistsError("This uri is already taken.")

        status = ProjectStatus.ONLINE if user.is_superuser else ProjectStatus.NEW
        project = OpenProject.objects.create(user=user, status=status, **fields)
        logger.info("Project %s (%s) published by %s", project.id, project.uri, user.username)
        return project

    def _modify(self, user, project_id: int, fields: dict) -> OpenProject:
        project = OpenProject.objects.select_for_update().filter(id=project_id).first()
        if project is None:
            raise NotFoundError("Project not found.")

        if not project.is_editable_by(user):
            logger.warning("User %s tried to modify project %s owned by %s", user.pk, project.id, project.user_id)
            raise NotOwnerError()

        if fields["uri"] != project.uri and OpenProject.objects.filter(uri=fields["uri"]).exclude(id=project.id).exists():
            raise AlreadyExistsError("This uri is already taken.")

        for name, value in fields.items():
            setattr(project, name, value)
        project.save()
        logger.info("Project %s modified by %s", project.id, user.username)
        return project


project_service = ProjectService()
