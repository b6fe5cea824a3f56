import secrets

from django.contrib.auth import get_user_model
from django.db import models

from apps.core.language import DEFAULT_LANGUAGE, Language

User = get_user_model()


def generate_security_key():
    return secrets.token_urlsafe(32)


class Organization(models.Model):
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class Account(models.Model):
    class Role(models.TextChoices):
        ADMINISTRATOR = "administrator", "Administrator"
        CONTRIBUTOR = "contributor", "Contributor"
        REVIEWER = "reviewer", "Reviewer"
        FREELANCER = "freelancer", "Freelancer"
        DISABLED = "disabled", "Disabled"

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="account")
    organization = models.ForeignKey(
        Organization,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="accounts",
    )
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.CONTRIBUTOR)
    language = models.CharField(
        max_length=8,
        choices=Language.choices,
        default=DEFAULT_LANGUAGE,
        help_text="Language for help pages and lifecycle mail",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.full_name or self.user.username

    @property
    def email(self):
        return self.user.email

    @property
    def full_name(self):
        return self.user.get_full_name()

    @property
    def organization_name(self):
        return self.organization.name if self.organization else ""

    @property
    def is_reviewer(self):
        return self.role == self.Role.REVIEWER

    def get_security_key(self):
        """Return the account's security key, creating one if needed."""
        key, _ = SecurityKey.objects.get_or_create(account=self)
        return key

    def issue_security_key(self):
        """Return a freshly generated security key, replacing any previous one."""
        key, created = SecurityKey.objects.get_or_create(account=self)
        if not created:
            key.refresh()
        return key


class SecurityKey(models.Model):
    """
    Single-use secret mailed to an account to activate it or reset its password.
    """

    account = models.OneToOneField(Account, on_delete=models.CASCADE, related_name="security_key")
    key = models.CharField(max_length=64, unique=True, default=generate_security_key)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Security key for {self.account}"

    def refresh(self):
        self.key = generate_security_key()
        self.save(update_fields=["key", "updated_at"])
