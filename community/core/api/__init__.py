from community.core.api.auth import SessionAuth
from community.core.api.base import BaseAPI
from community.core.api.permissions import IsAuthenticated
from community.core.api.permissions import NoSensitiveWords


__all__ = ["BaseAPI", "SessionAuth", "IsAuthenticated", "NoSensitiveWords"]
