# accounts/authentication.py
from django.conf import settings
from rest_framework.authentication import BaseAuthentication

from images.models import ANONYMOUS, CallerId

import logging

logger = logging.getLogger(__name__)


class CallerUser:
    """Stand-in user for a caller whose identity was asserted upstream."""
    is_authenticated = True
    is_anonymous = False

    def __init__(self, caller_id):
        self.id = caller_id
        self.pk = caller_id

    def __str__(self):
        return f"CallerUser {self.id}"


class CallerHeaderAuthentication(BaseAuthentication):
    """
    Trust the caller id placed in a request header by the hosting proxy.
    """

    def authenticate(self, request):
        if not settings.GALLERY_TRUST_CALLER_HEADER:
            return None
        meta_key = 'HTTP_' + settings.GALLERY_CALLER_HEADER.upper().replace('-', '_')
        caller_id = request.META.get(meta_key, '').strip()
        if not caller_id:
            return None
        return CallerUser(caller_id), None

    def authenticate_header(self, request):
        return settings.GALLERY_CALLER_HEADER


def caller_from_request(request):
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return ANONYMOUS
    # TokenUser and CallerUser both carry the caller id as `id`
    caller = CallerId(str(user.id))
    logger.debug(f"request caller is {caller}")
    return caller
