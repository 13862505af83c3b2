"""
Models for user submitted open source projects.
"""

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from community.core.models import BaseModel


class ProjectStatus(models.IntegerChoices):
    NEW = 0, _("new")
    ONLINE = 1, _("online")
    OFFLINE = 2, _("offline")


VISIBLE_STATUSES = (ProjectStatus.NEW, ProjectStatus.ONLINE)


class OpenProject(BaseModel):
    """
    An open source project listed on the site.

    ``uri`` is the human readable slug of the detail page (``/p/<uri>``).
    The counters are denormalized; they are kept up to date by the
    handlers registered in ``community.projects.handlers``.

    Inherits from BaseModel:
        - id: auto-increment primary key, also the list cursor
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    name = models.CharField(_("name"), max_length=127)
    category = models.CharField(_("category"), max_length=127, blank=True)
    uri = models.SlugField(_("uri"), max_length=127, unique=True)
    home = models.CharField(_("home page"), max_length=255, blank=True)
    doc = models.CharField(_("documentation"), max_length=255, blank=True)
    download = models.CharField(_("download"), max_length=255, blank=True)
    src = models.CharField(_("source"), max_length=255, blank=True)
    logo = models.CharField(_("logo"), max_length=255, blank=True)
    desc = models.TextField(_("description"), blank=True)
    repo = models.CharField(_("repository"), max_length=255, blank=True)
    author = models.CharField(_("author"), max_length=127, blank=True)
    licence = models.CharField(_("licence"), max_length=127, blank=True)
    lang = models.CharField(_("language"), max_length=127, blank=True)
    os = models.CharField(_("operating system"), max_length=127, blank=True)
    tags = models.CharField(_("tags"), max_length=127, blank=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="projects",
        verbose_name=_("submitted by"),
    )
    viewnum = models.PositiveIntegerField(_("views"), default=0)
    cmtnum = models.PositiveIntegerField(_("comments"), default=0)
    likenum = models.IntegerField(_("likes"), default=0)
    lastreplyuid = models.PositiveBigIntegerField(_("last replier"), default=0)
    lastreplytime = models.DateTimeField(_("last reply time"), null=True, blank=True)
    status = models.PositiveSmallIntegerField(
        _("status"),
        choices=ProjectStatus.choices,
        default=ProjectStatus.NEW,
    )

    class Meta:
        verbose_name = _("open source project")
        verbose_name_plural = _("open source projects")
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["status", "-id"], name="project_status_id_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    def get_absolute_url(self) -> str:
        return reverse("community:project_detail", kwargs={"uri": self.uri})

    def is_editable_by(self, user) -> bool:
        """Owner and site administrators may edit a project."""
        return bool(user.is_superuser or self.user_id == user.pk)
