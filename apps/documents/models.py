from django.db import models

from apps.accounts.models import Account


class Document(models.Model):
    class Access(models.TextChoices):
        PRIVATE = "private", "Private"
        ORGANIZATION = "organization", "Organization"
        PUBLIC = "public", "Public"

    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="documents")
    title = models.CharField(max_length=1000)
    access = models.CharField(max_length=20, choices=Access.choices, default=Access.PRIVATE)
    hit_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title
