"""
Likes, favorites and comments API controller.
"""

import logging

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_post

from community.core.api import BaseAPI
from community.core.api import IsAuthenticated
from community.core.api import NoSensitiveWords
from community.core.api import SessionAuth
from community.core.exceptions import APIException
from community.core.exceptions import BadRequestError
from community.core.models import ObjectType
from community.core.schemas import EnvelopeSchema
from community.core.schemas import fail
from community.core.schemas import success
from community.core.utils import must_int
from community.interactions.services import comment_service
from community.interactions.services import favorite_service
from community.interactions.services import like_service

logger = logging.getLogger(__name__)


def parse_objtype(objtype: int) -> ObjectType:
    if objtype not in ObjectType.values:
        raise BadRequestError("Unknown object type.")
    return ObjectType(objtype)


@api_controller("", tags=["Interactions"], auth=SessionAuth(), permissions=[IsAuthenticated])
class InteractionsController(BaseAPI):
    """Form endpoints used by the like / favorite / comment widgets."""

    @http_post(
        "/like/{objtype}/{objid}",
        response={200: EnvelopeSchema},
        url_name="like_object",
    )
    def like(self, request: HttpRequest, objtype: int, objid: int):
        """Like (flag=1), dislike (flag=2) or withdraw (flag=0)."""
        flag = must_int(request.POST.get("flag"), default=1)
        try:
            result = like_service.like(request.user, parse_objtype(objtype), objid, flag)
        except APIException as e:
            return fail(1, e.message)
        return success({"flag": result})

    @http_post(
        "/favorite/{objtype}/{objid}",
        response={200: EnvelopeSchema},
        url_name="favorite_object",
    )
    def favorite(self, request: HttpRequest, objtype: int, objid: int):
        """Collect the object, or uncollect it when already collected."""
        try:
            collected = favorite_service.toggle(request.user, parse_objtype(objtype), objid)
        except APIException as e:
            return fail(1, e.message)
        return success({"collected": collected})

    @http_post(
        "/comment/{objtype}/{objid}",
        response={200: EnvelopeSchema},
        url_name="comment_object",
        permissions=[IsAuthenticated, NoSensitiveWords],
    )
    def comment(self, request: HttpRequest, objtype: int, objid: int):
        try:
            comment = comment_service.publish(
                request.user,
                parse_objtype(objtype),
                objid,
                request.POST.get("content", ""),
            )
        except APIException as e:
            return fail(1, e.message)

        logger.info("Comment #%d on %s:%s by %s", comment.floor, objtype, objid, request.user.pk)
        return success({"floor": comment.floor, "id": comment.id})
