"""
Mail an alert for unhandled exceptions.
"""

import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

logger = logging.getLogger(__name__)


class ExceptionNotificationMiddleware:
    """
    Sends an exception notification to support when a view raises.

    Only active when EXCEPTION_NOTIFICATIONS is set. The exception itself is
    left to Django's regular error handling.
    """

    IGNORED = (Http404, PermissionDenied)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not settings.EXCEPTION_NOTIFICATIONS or isinstance(exception, self.IGNORED):
            return None

        from apps.mailers.mailer import LifecycleMailer

        params = request.POST if request.method == "POST" else request.GET
        logger.info("Mailing exception notification for %s %s", request.method, request.path)
        LifecycleMailer().exception_notification(exception, params)
        return None
