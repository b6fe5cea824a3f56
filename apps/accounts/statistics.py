"""
CSV statistics mailed to the team twice a month.

Any object with accounts_csv() and top_documents_csv() can stand in for
this module when composing the report mail.
"""

import csv
import io

from django.db.models import Count

from apps.accounts.models import Account
from apps.documents.models import Document


def _to_csv(header, rows):
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def accounts_csv() -> bytes:
    """One row per account with its document count."""
    accounts = (
        Account.objects.select_related("user", "organization")
        .annotate(document_count=Count("documents"))
        .order_by("id")
    )
    rows = (
        [
            account.id,
            account.full_name,
            account.email,
            account.organization_name,
            account.role,
            account.language,
            account.document_count,
            account.created_at.date().isoformat(),
        ]
        for account in accounts
    )
    return _to_csv(
        ["id", "name", "email", "organization", "role", "language", "documents", "created"],
        rows,
    )


def top_documents_csv(limit: int = 100) -> bytes:
    """The most viewed public documents."""
    documents = (
        Document.objects.filter(access=Document.Access.PUBLIC)
        .select_related("account__user", "account__organization")
        .order_by("-hit_count", "id")[:limit]
    )
    rows = (
        [
            document.id,
            document.title,
            document.hit_count,
            document.account.full_name,
            document.account.organization_name,
        ]
        for document in documents
    )
    return _to_csv(["id", "title", "hits", "account", "organization"], rows)
