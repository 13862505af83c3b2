from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class InteractionsConfig(AppConfig):
    name = "community.interactions"
    verbose_name = _("Likes, favorites, comments and views")
