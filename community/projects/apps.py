from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ProjectsConfig(AppConfig):
    name = "community.projects"
    verbose_name = _("Open Source Projects")

    def ready(self):
        from community.projects.handlers import register_object_handlers

        register_object_handlers()
