from django.contrib.auth.models import AbstractUser
from django.db.models import CharField
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    """
    Community member.

    The integer primary key is the member's uid, it is what likes,
    favorites and view records point at.
    """

    avatar = CharField(_("avatar"), max_length=255, blank=True)

    class Meta:
        verbose_name = _("user")
        verbose_name_plural = _("users")

    def __str__(self) -> str:
        return self.username

    @property
    def uid(self) -> int:
        return self.pk

    @property
    def is_root(self) -> bool:
        """Site administrators may edit anything and see view analytics."""
        return self.is_superuser
