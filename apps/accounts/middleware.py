from django.utils.deprecation import MiddlewareMixin

from apps.accounts.models import Account


class CurrentAccountMiddleware(MiddlewareMixin):
    """
    Middleware that sets request.account for authenticated users.
    """

    def process_request(self, request):
        if request.user.is_authenticated:
            request.account = Account.objects.filter(user=request.user).select_related("user", "organization").first()
        else:
            request.account = None
