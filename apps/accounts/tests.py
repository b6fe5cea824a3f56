"""
Account app tests - models, signals and statistics.
"""

import csv
import io

from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from apps.accounts import statistics
from apps.accounts.models import Account, Organization, SecurityKey
from apps.accounts.utils import get_current_account
from apps.documents.models import Document

User = get_user_model()


class AccountModelTestCase(TestCase):
    """Tests for Account model."""

    def setUp(self):
        self.organization = Organization.objects.create(name="The Chronicle", slug="chronicle")
        self.user = User.objects.create_user(
            username="jdoe", email="jdoe@example.com", password="testpass123", first_name="Jane", last_name="Doe"
        )
        self.account = Account.objects.get(user=self.user)
        self.account.organization = self.organization
        self.account.save()

    def test_user_gets_account_on_creation(self):
        """Creating a user also creates its account."""
        self.assertEqual(Account.objects.filter(user=self.user).count(), 1)
        self.assertEqual(self.account.language, "en")
        self.assertEqual(self.account.role, Account.Role.CONTRIBUTOR)

    def test_account_properties(self):
        self.assertEqual(self.account.email, "jdoe@example.com")
        self.assertEqual(self.account.full_name, "Jane Doe")
        self.assertEqual(self.account.organization_name, "The Chronicle")
        self.assertEqual(str(self.account), "Jane Doe")
        self.assertFalse(self.account.is_reviewer)

    def test_organization_name_without_organization(self):
        self.account.organization = None
        self.assertEqual(self.account.organization_name, "")

    def test_get_security_key_is_stable(self):
        first = self.account.get_security_key()
        second = self.account.get_security_key()
        self.assertEqual(first.key, second.key)
        self.assertEqual(SecurityKey.objects.count(), 1)

    def test_issue_security_key_refreshes(self):
        first = self.account.get_security_key().key
        issued = self.account.issue_security_key().key
        self.assertNotEqual(first, issued)
        self.assertEqual(SecurityKey.objects.get(account=self.account).key, issued)


class CurrentAccountTestCase(TestCase):
    """Tests for resolving the requesting account."""

    def setUp(self):
        self.factory = RequestFactory()
        self.user = User.objects.create_user(username="jdoe", email="jdoe@example.com", password="testpass123")

    def test_anonymous_request_has_no_account(self):
        from django.contrib.auth.models import AnonymousUser

        request = self.factory.get("/")
        request.user = AnonymousUser()
        self.assertIsNone(get_current_account(request))

    def test_falls_back_to_database_lookup(self):
        request = self.factory.get("/")
        request.user = self.user
        self.assertEqual(get_current_account(request), Account.objects.get(user=self.user))


class StatisticsTestCase(TestCase):
    """Tests for the CSV statistics."""

    def setUp(self):
        user = User.objects.create_user(username="jdoe", email="jdoe@example.com", password="testpass123")
        self.account = Account.objects.get(user=user)
        Document.objects.create(account=self.account, title="Popular", access=Document.Access.PUBLIC, hit_count=50)
        Document.objects.create(account=self.account, title="Quiet", access=Document.Access.PUBLIC, hit_count=5)
        Document.objects.create(account=self.account, title="Secret", access=Document.Access.PRIVATE, hit_count=99)

    def read(self, payload):
        return list(csv.reader(io.StringIO(payload.decode("utf-8"))))

    def test_accounts_csv(self):
        rows = self.read(statistics.accounts_csv())
        self.assertEqual(rows[0][0], "id")
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][2], "jdoe@example.com")
        self.assertEqual(rows[1][6], "3")

    def test_top_documents_csv_only_lists_public_documents(self):
        rows = self.read(statistics.top_documents_csv())
        self.assertEqual([row[1] for row in rows[1:]], ["Popular", "Quiet"])
