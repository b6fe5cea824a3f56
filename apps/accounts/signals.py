"""
Signals for automatic account creation.
"""

from allauth.account.signals import user_signed_up
from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.accounts.models import Account

User = get_user_model()


@receiver(user_signed_up)
def create_account_on_signup(sender, request, user, **kwargs):
    """
    Create the account when a user signs up
    (via regular signup or social login).
    """
    Account.objects.get_or_create(user=user)


@receiver(post_save, sender=User)
def ensure_user_has_account(sender, instance, created, **kwargs):
    """
    Fallback: ensure every user has an account.
    This catches users created outside the signup flow.
    """
    if created:
        Account.objects.get_or_create(user=instance)
