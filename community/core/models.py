from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel


class ObjectType(models.IntegerChoices):
    """
    Tags of the objects users can like, collect, comment and view.

    The values are part of the public URLs (``/like/<objtype>/<objid>``)
    and of the stored rows, never renumber them.
    """

    TOPIC = 0, _("topic")
    ARTICLE = 1, _("article")
    RESOURCE = 2, _("resource")
    WIKI = 3, _("wiki")
    PROJECT = 4, _("project")
    BOOK = 5, _("book")


class BaseModel(TimeStampedModel):
    """
    Base model with an auto-increment primary key and created/modified timestamps.

    All models should inherit from this class for consistency.
    Provides:
        - id: BigAutoField primary key (monotonic, usable as a pagination cursor)
        - created: DateTimeField auto-set on creation
        - modified: DateTimeField auto-updated on save
    """

    id = models.BigAutoField(primary_key=True)

    class Meta:
        abstract = True


class ObjectRefModel(BaseModel):
    """Base for rows that point at a (objid, objtype) pair."""

    objid = models.PositiveBigIntegerField(_("object id"))
    objtype = models.PositiveSmallIntegerField(_("object type"), choices=ObjectType.choices)

    class Meta:
        abstract = True
