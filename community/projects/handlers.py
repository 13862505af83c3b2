"""
Counter callbacks of the project object type.

Interactions (comments, likes, favorites, views) only know ``(objid, objtype)``;
these handlers check that the project exists and keep the denormalized
counters of ``OpenProject`` in sync.
"""

import logging

from django.db.models import F

from community.core.models import ObjectType
from community.core.registry import register_comment_object
from community.core.registry import register_favorite_object
from community.core.registry import register_like_object
from community.core.registry import register_view_object
from community.projects.models import OpenProject

logger = logging.getLogger(__name__)


class ProjectObject:
    def exists(self, objid: int) -> bool:
        return OpenProject.objects.filter(id=objid).exists()

    def __str__(self) -> str:
        return "project"


class ProjectComment(ProjectObject):
    """Called after a comment is published on a project."""

    def update_comment(self, objid: int, uid: int, cmttime) -> None:
        updated = OpenProject.objects.filter(id=objid).update(
            cmtnum=F("cmtnum") + 1,
            lastreplyuid=uid,
            lastreplytime=cmttime,
        )
        if not updated:
            logger.warning("Comment on missing project %s", objid)


class ProjectLike(ProjectObject):
    """Called after a like on a project is added (+1) or withdrawn (-1)."""

    def update_likenum(self, objid: int, num: int) -> None:
        OpenProject.objects.filter(id=objid).update(likenum=F("likenum") + num)


class ProjectViews(ProjectObject):
    """Called when buffered view counts are flushed."""

    def update_viewnum(self, objid: int, num: int) -> None:
        OpenProject.objects.filter(id=objid).update(viewnum=F("viewnum") + num)


def register_object_handlers() -> None:
    """Register the project callbacks. Called once from ``ProjectsConfig.ready()``."""
    register_comment_object(ObjectType.PROJECT, ProjectComment())
    register_like_object(ObjectType.PROJECT, ProjectLike())
    register_favorite_object(ObjectType.PROJECT, ProjectObject())
    register_view_object(ObjectType.PROJECT, ProjectViews())
