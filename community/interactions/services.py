"""
Services behind likes, favorites, comments and view tracking.

Object type specific bookkeeping (counters on the liked / commented / viewed
object) is delegated to the handlers of ``community.core.registry``.
"""

import logging
from urllib.parse import urlsplit

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.db.models import F
from django.db.models import Max

from community.core.exceptions import NotFoundError
from community.core.exceptions import ValidationError
from community.core.registry import comment_objects
from community.core.registry import favorite_objects
from community.core.registry import like_objects
from community.core.registry import view_objects
from community.core.utils import client_ip
from community.interactions.models import Comment
from community.interactions.models import Favorite
from community.interactions.models import Like
from community.interactions.models import LikeFlag
from community.interactions.models import ViewRecord
from community.interactions.models import ViewSource

logger = logging.getLogger(__name__)

LIKE_CANCEL = 0


def get_existing_handler(registry, objtype: int, objid: int):
    """Handler of ``objtype``, after checking that object ``objid`` exists."""
    handler = registry.get(objtype)
    if not handler.exists(objid):
        raise NotFoundError(details={"objtype": objtype, "objid": objid})
    return handler


class LikeService:
    def like(self, user, objtype: int, objid: int, flag: int) -> int:
        """
        Set the like state of ``user`` on an object and return the new flag.

        ``flag`` is ``LikeFlag.LIKE``, ``LikeFlag.DISLIKE`` or 0 to withdraw.
        The object's like counter follows the number of LIKE rows.
        """
        if flag not in (LIKE_CANCEL, *LikeFlag.values):
            raise ValidationError("Unknown like flag.")
        handler = get_existing_handler(like_objects, objtype, objid)

        with transaction.atomic():
            likes = Like.objects.select_for_update().filter(user=user, objid=objid, objtype=objtype)
            if flag == LIKE_CANCEL:
                like = likes.first()
                if like is None:
                    return flag
                previous = like.flag
                like.delete()
            else:
                # get_or_create re-reads the row when a concurrent first like wins the insert.
                like, created = likes.get_or_create(user=user, objid=objid, objtype=objtype, defaults={"flag": flag})
                if created:
                    previous = LIKE_CANCEL
                else:
                    previous = like.flag
                    if previous == flag:
                        return flag
                    like.flag = flag
                    like.save(update_fields=["flag", "modified"])

            delta = int(flag == LikeFlag.LIKE) - int(previous == LikeFlag.LIKE)
            if delta:
                handler.update_likenum(objid, delta)

        return flag

    def had_like(self, uid: int, objid: int, objtype: int) -> int:
        """The viewer's flag on the object, 0 when none."""
        flag = Like.objects.filter(user_id=uid, objid=objid, objtype=objtype).values_list("flag", flat=True).first()
        return flag or LIKE_CANCEL

    def find_user_like_objects(self, uid: int, objtype: int, start: int, end: int) -> dict[int, int]:
        """Flags of ``uid`` on every object whose id lies between ``start`` and ``end`` (either order)."""
        low, high = sorted((start, end))
        likes = Like.objects.filter(user_id=uid, objtype=objtype, objid__range=(low, high))
        return dict(likes.values_list("objid", "flag"))


class FavoriteService:
    def toggle(self, user, objtype: int, objid: int) -> bool:
        """Collect or uncollect an object; returns whether it is now collected."""
        deleted, _ = Favorite.objects.filter(user=user, objid=objid, objtype=objtype).delete()
        if deleted:
            return False
        get_existing_handler(favorite_objects, objtype, objid)
        Favorite.objects.get_or_create(user=user, objid=objid, objtype=objtype)
        return True

    def had_favorite(self, uid: int, objid: int, objtype: int) -> bool:
        return Favorite.objects.filter(user_id=uid, objid=objid, objtype=objtype).exists()


class CommentService:
    def publish(self, user, objtype: int, objid: int, content: str) -> Comment:
        handler = get_existing_handler(comment_objects, objtype, objid)
        content = (content or "").strip()
        if not content:
            raise ValidationError("Comment content is required.")

        with transaction.atomic():
            last_floor = Comment.objects.filter(objid=objid, objtype=objtype).aggregate(floor=Max("floor"))["floor"]
            comment = Comment.objects.create(
                user=user,
                objid=objid,
                objtype=objtype,
                content=content,
                floor=(last_floor or 0) + 1,
            )
            handler.update_comment(objid, user.pk, comment.created)

        return comment

    def find_objects(self, objid: int, objtype: int) -> list[Comment]:
        return list(Comment.objects.filter(objid=objid, objtype=objtype).select_related("user").order_by("floor"))


class ViewRecordService:
    def record(self, objid: int, objtype: int, uid: int) -> bool:
        """Remember that ``uid`` has seen the object. Returns True on first view."""
        _, created = ViewRecord.objects.get_or_create(user_id=uid, objid=objid, objtype=objtype)
        return created

    def find_user_num(self, objid: int, objtype: int) -> int:
        return ViewRecord.objects.filter(objid=objid, objtype=objtype).count()


SEARCH_ENGINES = {
    "google": ("google.com",),
    "baidu": ("baidu.com",),
    "bing": ("bing.com",),
    "sogou": ("sogou.com",),
    "so": ("so.com",),
}


def classify_referer(referer: str) -> str:
    """ViewSource column counting visits coming from ``referer``."""
    host = (urlsplit(referer).hostname or "").lower()
    # google.com.hk, google.co.jp...
    if host.startswith(("google.", "www.google.")):
        return "google"
    for field, domains in SEARCH_ENGINES.items():
        for domain in domains:
            if host == domain or host.endswith("." + domain):
                return field
    return "other"


class ViewSourceService:
    def record(self, request, objtype: int, objid: int) -> str | None:
        """Count the referer of an external visit. Internal navigation is ignored."""
        referer = request.META.get("HTTP_REFERER", "")
        if not referer:
            return None
        if urlsplit(referer).netloc == request.get_host():
            return None

        field = classify_referer(referer)
        ViewSource.objects.get_or_create(objid=objid, objtype=objtype)
        ViewSource.objects.filter(objid=objid, objtype=objtype).update(**{field: F(field) + 1})
        return field

    def find_one(self, objid: int, objtype: int) -> ViewSource | None:
        return ViewSource.objects.filter(objid=objid, objtype=objtype).first()


class ViewsCounter:
    """
    Buffer object views in the cache and write them back in batches.

    A viewer (uid when logged in, client ip otherwise) counts once per object
    within ``settings.VIEWS_DEDUPE_TIMEOUT``. ``flush()`` is run periodically
    by Celery beat.

    Objects with buffered counts are listed in an append only log: every entry
    is its own key, numbered with ``cache.incr``, so concurrent viewers never
    rewrite a shared value. An object is appended once until a flush picks it
    up again (the ``views:queued:*`` marker).
    """

    SEQ_KEY = "views:log:seq"
    CURSOR_KEY = "views:log:cursor"
    LOCK_KEY = "views:flush:lock"
    # An object whose log entry was never written is queued again after this.
    QUEUED_TIMEOUT = 60 * 60
    FLUSH_LOCK_TIMEOUT = 5 * 60
    FLUSH_BATCH = 500

    def __init__(self, source_service: ViewSourceService | None = None):
        self.source_service = source_service or ViewSourceService()

    @staticmethod
    def count_key(objtype: int, objid: int) -> str:
        return f"views:count:{objtype}:{objid}"

    @staticmethod
    def queued_key(objtype: int, objid: int) -> str:
        return f"views:queued:{objtype}:{objid}"

    @staticmethod
    def entry_key(seq: int) -> str:
        return f"views:log:{seq}"

    @staticmethod
    def _incr(key: str) -> int:
        cache.add(key, 0, timeout=None)
        try:
            return cache.incr(key)
        except ValueError:
            # Evicted between add() and incr().
            cache.set(key, 1, timeout=None)
            return 1

    def _next_seq(self) -> int:
        return self._incr(self.SEQ_KEY)

    def _enqueue(self, objtype: int, objid: int) -> None:
        seq = self._next_seq()
        cache.set(self.entry_key(seq), (objtype, objid), timeout=None)

    def incr(self, request, objtype: int, objid: int, uid: int | None = None) -> bool:
        """Count one view. Returns False when the viewer was already counted."""
        objtype, objid = int(objtype), int(objid)
        viewer = f"u{uid}" if uid else f"ip{client_ip(request)}"
        seen_key = f"views:seen:{objtype}:{objid}:{viewer}"
        if not cache.add(seen_key, 1, timeout=settings.VIEWS_DEDUPE_TIMEOUT):
            return False

        self._incr(self.count_key(objtype, objid))
        if cache.add(self.queued_key(objtype, objid), 1, timeout=self.QUEUED_TIMEOUT):
            self._enqueue(objtype, objid)

        self.source_service.record(request, objtype, objid)
        return True

    def pending(self, objtype: int, objid: int) -> int:
        return cache.get(self.count_key(objtype, objid)) or 0

    def flush(self) -> int:
        """Write buffered counts to the objects. Returns the number of objects updated."""
        if not cache.add(self.LOCK_KEY, 1, timeout=self.FLUSH_LOCK_TIMEOUT):
            logger.info("View counters are already being flushed")
            return 0
        try:
            flushed = self._flush_log()
        finally:
            cache.delete(self.LOCK_KEY)

        if flushed:
            logger.info("Flushed view counters of %d objects", flushed)
        return flushed

    def _read_log(self, cursor: int, head: int):
        for start in range(cursor + 1, head + 1, self.FLUSH_BATCH):
            seqs = range(start, min(start + self.FLUSH_BATCH, head + 1))
            entries = cache.get_many([self.entry_key(seq) for seq in seqs])
            for seq in seqs:
                yield seq, entries.get(self.entry_key(seq))

    def _flush_log(self) -> int:
        # Entries numbered up to previous_head were taken before the last run.
        cursor, previous_head = cache.get(self.CURSOR_KEY) or (0, 0)
        head = cache.get(self.SEQ_KEY) or 0
        if head < cursor:
            logger.warning("View log sequence went back from %d to %d, rereading it", cursor, head)
            cursor = previous_head = 0

        flushed = 0
        done = []
        for seq, entry in self._read_log(cursor, head):
            if entry is None:
                if seq > previous_head:
                    # Numbered but not written yet, resume from here next run.
                    break
                logger.warning("View log entry %d was never written, skipping it", seq)
            elif self._flush_object(*entry):
                flushed += 1
            cursor = seq
            done.append(self.entry_key(seq))

        cache.delete_many(done)
        cache.set(self.CURSOR_KEY, (cursor, head), timeout=None)
        return flushed

    def _flush_object(self, objtype: int, objid: int) -> bool:
        # Views counted from now on queue the object again.
        cache.delete(self.queued_key(objtype, objid))
        key = self.count_key(objtype, objid)
        num = cache.get(key) or 0
        if not num:
            return False
        if objtype not in view_objects:
            logger.warning("No view handler for object type %s, dropping %d views of %s", objtype, num, objid)
            cache.delete(key)
            return False

        view_objects.get(objtype).update_viewnum(objid, num)
        cache.decr(key, num)
        return True


like_service = LikeService()
favorite_service = FavoriteService()
comment_service = CommentService()
view_record_service = ViewRecordService()
view_source_service = ViewSourceService()
views_counter = ViewsCounter(view_source_service)
