"""
Celery tasks for view tracking.

View records are best effort telemetry: the request that produced them never
waits for them, and they may be dropped (broker down, stale in the queue)
rather than pile up.
"""

import logging

from celery import shared_task
from django.conf import settings
from django.db import DatabaseError
from kombu.exceptions import OperationalError

from community.interactions.services import view_record_service
from community.interactions.services import views_counter

logger = logging.getLogger(__name__)


@shared_task(
    ignore_result=True,
    autoretry_for=(DatabaseError,),
    retry_backoff=True,
    retry_backoff_max=60,
    retry_jitter=True,
    max_retries=3,
)
def record_view_task(objid: int, objtype: int, uid: int) -> None:
    """Store that ``uid`` has viewed an object."""
    if view_record_service.record(objid, objtype, uid):
        logger.debug("First view of %s:%s by %s", objtype, objid, uid)


@shared_task(ignore_result=True)
def flush_views_task() -> int:
    """Write the buffered view counters back to the database."""
    return views_counter.flush()


def dispatch_view_record(objid: int, objtype: int, uid: int) -> bool:
    """
    Queue a view record without waiting for it.

    Returns False when the event was dropped because the broker could not be
    reached.
    """
    try:
        record_view_task.apply_async(
            args=(int(objid), int(objtype), int(uid)),
            expires=settings.VIEW_RECORD_TASK_EXPIRES,
        )
    except OperationalError:
        logger.warning("Broker unavailable, dropping view record of %s:%s by %s", objtype, objid, uid)
        return False
    return True
