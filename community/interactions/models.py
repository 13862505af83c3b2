"""
Generic user interactions with site objects.

Every row points at an ``(objid, objtype)`` pair; ``objtype`` is one of
``community.core.models.ObjectType``.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from community.core.models import ObjectRefModel


class LikeFlag(models.IntegerChoices):
    LIKE = 1, _("like")
    DISLIKE = 2, _("dislike")


class Like(ObjectRefModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="likes",
        verbose_name=_("user"),
    )
    flag = models.PositiveSmallIntegerField(_("flag"), choices=LikeFlag.choices, default=LikeFlag.LIKE)

    class Meta:
        verbose_name = _("like")
        verbose_name_plural = _("likes")
        constraints = [
            models.UniqueConstraint(fields=["user", "objid", "objtype"], name="unique_like_per_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} {self.get_flag_display()} {self.objtype}:{self.objid}"


class Favorite(ObjectRefModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorites",
        verbose_name=_("user"),
    )

    class Meta:
        verbose_name = _("favorite")
        verbose_name_plural = _("favorites")
        constraints = [
            models.UniqueConstraint(fields=["user", "objid", "objtype"], name="unique_favorite_per_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.objtype}:{self.objid}"


class Comment(ObjectRefModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
        verbose_name=_("user"),
    )
    content = models.TextField(_("content"))
    # 1-based position of the comment under its object.
    floor = models.PositiveIntegerField(_("floor"))

    class Meta:
        verbose_name = _("comment")
        verbose_name_plural = _("comments")
        ordering = ["objtype", "objid", "floor"]
        constraints = [
            models.UniqueConstraint(fields=["objid", "objtype", "floor"], name="unique_comment_floor"),
        ]

    def __str__(self) -> str:
        return f"#{self.floor} on {self.objtype}:{self.objid}"


class ViewRecord(ObjectRefModel):
    """A logged in member has seen an object at least once."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="view_records",
        verbose_name=_("user"),
    )

    class Meta:
        verbose_name = _("view record")
        verbose_name_plural = _("view records")
        constraints = [
            models.UniqueConstraint(fields=["user", "objid", "objtype"], name="unique_view_record_per_user"),
        ]


class ViewSource(ObjectRefModel):
    """Where the visitors of an object came from, by referer."""

    google = models.PositiveIntegerField(default=0)
    baidu = models.PositiveIntegerField(default=0)
    bing = models.PositiveIntegerField(default=0)
    sogou = models.PositiveIntegerField(default=0)
    so = models.PositiveIntegerField(default=0)
    other = models.PositiveIntegerField(default=0)

    class Meta:
        verbose_name = _("view source")
        verbose_name_plural = _("view sources")
        constraints = [
            models.UniqueConstraint(fields=["objid", "objtype"], name="unique_view_source"),
        ]

    @property
    def total(self) -> int:
        return self.google + self.baidu + self.bing + self.sogou + self.so + self.other
