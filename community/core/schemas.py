"""
Base schemas for the API.
"""

from typing import Any

from ninja import Schema


class EnvelopeSchema(Schema):
    """
    JSON envelope returned by form submissions.

    ``errno`` is 0 on success; any other value is a failure and ``msg``
    holds a message fit for end users.
    """

    errno: int
    msg: str
    data: Any = None


def success(data: Any = None, msg: str = "ok") -> tuple[int, EnvelopeSchema]:
    return 200, EnvelopeSchema(errno=0, msg=msg, data=data)


def fail(errno: int, msg: str) -> tuple[int, EnvelopeSchema]:
    """Failures are still HTTP 200, the client reads ``errno``."""
    return 200, EnvelopeSchema(errno=errno, msg=msg)
