def get_current_account(request):
    """
    Helper function to get the requesting account.
    Falls back to database lookup if not set on request (e.g. in tests).
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None

    account = getattr(request, "account", None)
    if account is not None:
        return account

    from apps.accounts.models import Account

    return Account.objects.filter(user=user).select_related("user", "organization").first()
