from django.contrib import admin

from .models import Comment
from .models import Favorite
from .models import Like
from .models import ViewRecord
from .models import ViewSource


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ["user", "objtype", "objid", "flag", "created"]
    list_filter = ["objtype", "flag"]
    raw_id_fields = ["user"]


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ["user", "objtype", "objid", "created"]
    list_filter = ["objtype"]
    raw_id_fields = ["user"]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["objtype", "objid", "floor", "user", "created"]
    list_filter = ["objtype", "created"]
    search_fields = ["content", "user__username"]
    raw_id_fields = ["user"]


@admin.register(ViewRecord)
class ViewRecordAdmin(admin.ModelAdmin):
    list_display = ["user", "objtype", "objid", "created"]
    list_filter = ["objtype"]
    raw_id_fields = ["user"]


@admin.register(ViewSource)
class ViewSourceAdmin(admin.ModelAdmin):
    list_display = ["objtype", "objid", "google", "baidu", "bing", "sogou", "so", "other"]
    list_filter = ["objtype"]
