from django.http import HttpResponseRedirect


class HttpResponseSeeOther(HttpResponseRedirect):
    """303 redirect: the client follows it with a GET whatever the original method."""

    status_code = 303
