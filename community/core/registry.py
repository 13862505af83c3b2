"""
Registry of per object type callbacks.

Comments, likes, favorites and views are stored generically as
``(objid, objtype)`` pairs. Whenever one of them changes, the owning app must
update its own counters (``cmtnum``, ``likenum``, ``viewnum``...). Every
handler also tells whether an object id exists, so nothing is recorded against
a missing object. Apps register one handler per object type and per kind at
startup, from their ``AppConfig.ready()``, and the interactions services look
them up here.
"""

import logging
from typing import Protocol

from community.core.exceptions import UnknownObjectTypeError

logger = logging.getLogger(__name__)


class InteractiveObject(Protocol):
    def exists(self, objid: int) -> bool: ...


class CommentObject(InteractiveObject, Protocol):
    def update_comment(self, objid: int, uid: int, cmttime) -> None: ...


class LikeObject(InteractiveObject, Protocol):
    def update_likenum(self, objid: int, num: int) -> None: ...


class ViewObject(InteractiveObject, Protocol):
    def update_viewnum(self, objid: int, num: int) -> None: ...


class ObjectRegistry:
    """Mapping from object type tag to handler, for one kind of callback."""

    def __init__(self, kind: str):
        self.kind = kind
        self._handlers: dict[int, object] = {}

    def register(self, objtype: int, handler) -> None:
        previous = self._handlers.get(int(objtype))
        if previous is not None and previous is not handler:
            logger.warning(
                "Replacing %s handler for object type %s: %r -> %r",
                self.kind,
                objtype,
                previous,
                handler,
            )
        self._handlers[int(objtype)] = handler

    def get(self, objtype: int):
        try:
            return self._handlers[int(objtype)]
        except (KeyError, TypeError, ValueError):
            raise UnknownObjectTypeError(details={"kind": self.kind, "objtype": objtype}) from None

    def __contains__(self, objtype) -> bool:
        try:
            return int(objtype) in self._handlers
        except (TypeError, ValueError):
            return False


comment_objects = ObjectRegistry("comment")
like_objects = ObjectRegistry("like")
favorite_objects = ObjectRegistry("favorite")
view_objects = ObjectRegistry("view")


def register_comment_object(objtype: int, handler: CommentObject) -> None:
    comment_objects.register(objtype, handler)


def register_like_object(objtype: int, handler: LikeObject) -> None:
    like_objects.register(objtype, handler)


def register_favorite_object(objtype: int, handler: InteractiveObject) -> None:
    favorite_objects.register(objtype, handler)


def register_view_object(objtype: int, handler: ViewObject) -> None:
    view_objects.register(objtype, handler)
