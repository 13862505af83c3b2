def must_int(value, default: int = 0) -> int:
    """Parse ``value`` as an int, falling back to ``default`` on anything unparsable."""
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def client_ip(request) -> str:
    """Best effort client address, honouring the first X-Forwarded-For hop."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")
