from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import OpenProject


@admin.register(OpenProject)
class OpenProjectAdmin(admin.ModelAdmin):
    list_display = ["name", "uri", "user", "status", "viewnum", "likenum", "cmtnum", "created"]
    list_filter = ["status", "lang", "created"]
    search_fields = ["name", "uri", "author", "user__username"]
    readonly_fields = ["created", "modified", "viewnum", "likenum", "cmtnum", "lastreplyuid", "lastreplytime"]
    raw_id_fields = ["user"]
    fieldsets = (
        (None, {"fields": ("name", "uri", "category", "status", "user")}),
        (_("Links"), {"fields": ("home", "doc", "download", "src", "repo", "logo")}),
        (_("About"), {"fields": ("desc", "author", "licence", "lang", "os", "tags")}),
        (_("Counters"), {"fields": ("viewnum", "likenum", "cmtnum", "lastreplyuid", "lastreplytime")}),
        (_("Dates"), {"fields": ("created", "modified")}),
    )
