"""
Custom rate limiting throttles.

Usage in REST views:
    from apps.core.throttles import ContactThrottle

    class MyView(APIView):
        throttle_classes = [ContactThrottle]
"""

from rest_framework.throttling import SimpleRateThrottle


class ContactThrottle(SimpleRateThrottle):
    """
    Rate-limits contact form submissions.
    Every accepted submission sends a mail to support.
    """

    scope = "contact"

    def get_cache_key(self, request, view):
        if request.user.is_authenticated:
            ident = request.user.pk
        else:
            ident = self.get_ident(request)

        return self.cache_format % {
            "scope": self.scope,
            "ident": ident,
        }
