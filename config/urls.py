from django.conf import settings
from django.contrib import admin
from django.urls import include
from django.urls import path

from config.api import api

urlpatterns = [
    path(settings.ADMIN_URL, admin.site.urls),
    path("", api.urls),
]

if settings.DEBUG and "debug_toolbar" in settings.INSTALLED_APPS:
    import debug_toolbar

    urlpatterns = [path("__debug__/", include(debug_toolbar.urls)), *urlpatterns]
