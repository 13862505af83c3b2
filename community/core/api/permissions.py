"""
Permission classes for API controllers.
"""

from typing import Any

from django.conf import settings
from django.http import HttpRequest
from ninja_extra import permissions

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


class IsAuthenticated(permissions.BasePermission):
    """
    Permission class that requires authentication.

    Checks if the user is authenticated before allowing access.
    """

    message = "Please log in first."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Check if the user is authenticated."""
        return bool(request.user and request.user.is_authenticated)


class NoSensitiveWords(permissions.BasePermission):
    """
    Reject submissions containing one of ``settings.SENSITIVE_WORDS``.

    Only form values of unsafe requests are inspected.
    """

    message = "Your submission contains forbidden words."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        if request.method in SAFE_METHODS:
            return True

        words = [word.lower() for word in settings.SENSITIVE_WORDS if word]
        if not words:
            return True

        for _field, values in request.POST.lists():
            for value in values:
                lowered = value.lower()
                if any(word in lowered for word in words):
                    return False
        return True
