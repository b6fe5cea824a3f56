"""
Tests for the lifecycle mailer.
"""

import csv
import io
from unittest import mock

from django.contrib.auth import get_user_model
from django.core import mail
from django.core.management import call_command
from django.template import TemplateDoesNotExist
from django.test import TestCase, override_settings
from django.utils import timezone

from apps.accounts.models import Account, Organization, SecurityKey
from apps.documents.models import Document
from apps.mailers.events import EVENTS, EventConfig, MailEvent, Sender
from apps.mailers.mailer import LifecycleMailer

User = get_user_model()


class FakeStatistics:
    def accounts_csv(self):
        return b"id,email\n1,jdoe@example.com\n"

    def top_documents_csv(self):
        return b"id,title\n7,Budget\n"


@override_settings(
    APP_NAME="DocumentCloud",
    ENVIRONMENT="test",
    SUPPORT_EMAIL="support@example.org",
    NO_REPLY_EMAIL="no-reply@example.org",
    REPORTS_EMAIL="info@example.org",
    SITE_URL="https://www.example.org",
)
class LifecycleMailerTestCase(TestCase):
    """Base test case with accounts and documents."""

    def setUp(self):
        self.organization = Organization.objects.create(name="The Chronicle", slug="chronicle")
        self.account = self.make_account("jdoe", "Jane", "Doe")
        self.admin = self.make_account("boss", "Ada", "Admin", role=Account.Role.ADMINISTRATOR)
        self.mailer = LifecycleMailer(statistics=FakeStatistics())

    def make_account(self, username, first_name, last_name, language="en", role=Account.Role.CONTRIBUTOR):
        user = User.objects.create_user(
            username=username,
            email=f"{username}@example.com",
            password="testpass123",
            first_name=first_name,
            last_name=last_name,
        )
        account = Account.objects.get(user=user)
        account.organization = self.organization
        account.language = language
        account.role = role
        account.save()
        return account


class AccountMailTestCase(LifecycleMailerTestCase):
    """Tests for account lifecycle mail."""

    def test_login_instructions(self):
        message = self.mailer.login_instructions(self.account, admin=self.admin)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(message.subject, "Welcome to DocumentCloud")
        self.assertEqual(message.from_email, "support@example.org")
        self.assertEqual(message.to, ["jdoe@example.com"])
        self.assertEqual(message.cc, ["boss@example.com"])
        key = SecurityKey.objects.get(account=self.account).key
        self.assertIn(f"key={key}", message.body)
        self.assertIn("The Chronicle", message.body)
        self.assertIn("Ada Admin", message.body)

    def test_login_instructions_without_admin(self):
        message = self.mailer.login_instructions(self.account)
        self.assertEqual(message.cc, [])

    def test_login_instructions_in_account_language(self):
        account = self.make_account("lucia", "Lucía", "Pérez", language="es")

        message = self.mailer.login_instructions(account)

        self.assertEqual(message.subject, "Bienvenido a DocumentCloud")
        self.assertIn("Hola Lucía Pérez", message.body)

    def test_missing_language_template_falls_back_to_default(self):
        account = self.make_account("lucia", "Lucía", "Pérez", language="es")

        message = self.mailer.membership_notification(account, self.organization)

        self.assertEqual(message.subject, "Has sido añadido a The Chronicle en DocumentCloud")
        self.assertIn("You have been added to The Chronicle", message.body)

    def test_membership_notification_mentions_admin(self):
        message = self.mailer.membership_notification(self.account, self.organization, admin=self.admin)

        self.assertEqual(message.to, ["jdoe@example.com"])
        self.assertEqual(message.cc, [])
        self.assertIn("Ada Admin has added you", message.body)

    def test_reset_request_issues_fresh_key(self):
        old_key = self.account.get_security_key().key

        message = self.mailer.reset_request(self.account)

        new_key = SecurityKey.objects.get(account=self.account).key
        self.assertNotEqual(old_key, new_key)
        self.assertIn(new_key, message.body)
        self.assertEqual(message.subject, "DocumentCloud password reset")
        self.assertEqual(message.to, ["jdoe@example.com"])

    def test_documents_finished_processing(self):
        message = self.mailer.documents_finished_processing(self.account, 3)

        self.assertEqual(message.subject, "Your documents are ready")
        self.assertIn("3 documents you uploaded have finished processing", message.body)

    def test_missing_default_template_raises(self):
        broken = EventConfig(
            template="no_such_template", sender=Sender.SUPPORT, subject_key="password_reset", localized=True
        )

        with mock.patch.dict(EVENTS, {MailEvent.RESET_REQUEST: broken}):
            with self.assertRaises(TemplateDoesNotExist):
                self.mailer.reset_request(self.account)

        self.assertEqual(len(mail.outbox), 0)


class ReviewerInstructionsTestCase(LifecycleMailerTestCase):
    """Tests for document review invitations."""

    def setUp(self):
        super().setUp()
        self.documents = [
            Document.objects.create(account=self.account, title="City Budget 2024"),
            Document.objects.create(account=self.account, title="Council Minutes"),
        ]

    def test_existing_account_is_flagged(self):
        with mock.patch("apps.mailers.mailer.render_to_string", return_value="body") as render:
            message = self.mailer.reviewer_instructions(self.documents, self.account, self.admin, key="abc")

        context = render.call_args.args[1]
        self.assertTrue(context["account_exists"])
        self.assertEqual(context["organization_name"], "The Chronicle")
        self.assertEqual(message.to, ["boss@example.com"])
        self.assertEqual(message.cc, ["jdoe@example.com"])
        self.assertEqual(message.subject, 'Review 2 document(s) on DocumentCloud: "City Budget 2024"')

    def test_reviewer_role_is_not_an_existing_account(self):
        reviewer = self.make_account("guest", "Gus", "Guest", role=Account.Role.REVIEWER)

        message = self.mailer.reviewer_instructions(self.documents, self.account, reviewer, message="Take a look")

        self.assertIn("without a DocumentCloud account", message.body)
        self.assertIn("Take a look", message.body)

    def test_without_reviewer_account_only_copies_inviter(self):
        message = self.mailer.reviewer_instructions(self.documents, self.account, key="abc")

        self.assertEqual(message.to, [])
        self.assertEqual(message.cc, ["jdoe@example.com"])
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("City Budget 2024", message.body)
        self.assertIn("key=abc", message.body)

    def test_uses_inviter_language(self):
        inviter = self.make_account("lucia", "Lucía", "Pérez", language="es")

        message = self.mailer.reviewer_instructions(self.documents, inviter)

        self.assertEqual(message.subject, 'Revisar 2 documento(s) en DocumentCloud: "City Budget 2024"')


class SupportMailTestCase(LifecycleMailerTestCase):
    """Tests for mail sent to the support team."""

    def test_contact_us_from_account(self):
        message = self.mailer.contact_us(self.account, {"message": "Hi there", "email": "other@example.com"})

        self.assertEqual(message.subject, "DocumentCloud message from Jane Doe")
        self.assertEqual(message.from_email, "no-reply@example.org")
        self.assertEqual(message.to, ["support@example.org"])
        self.assertEqual(message.reply_to, ["jdoe@example.com"])
        self.assertIn("Hi there", message.body)

    def test_contact_us_anonymous(self):
        message = self.mailer.contact_us(None, {"message": "Hi there", "email": "reader@example.com"})

        self.assertEqual(message.subject, "DocumentCloud message from reader@example.com")
        self.assertEqual(message.reply_to, ["reader@example.com"])

    def test_exception_notification_strips_password(self):
        params = {"email": "jdoe@example.com", "password": "hunter2"}

        with mock.patch("apps.mailers.mailer.socket.gethostname", return_value="web1"):
            message = self.mailer.exception_notification(KeyError("document_id"), params)

        self.assertEqual(message.subject, "DocumentCloud exception (test:web1): KeyError")
        self.assertEqual(message.from_email, "no-reply@example.org")
        self.assertEqual(message.to, ["support@example.org"])
        self.assertIn("email: jdoe@example.com", message.body)
        self.assertNotIn("password", message.body)
        self.assertNotIn("hunter2", message.body)
        # The caller's params are left untouched
        self.assertIn("password", params)

    def test_exception_notification_without_params(self):
        message = self.mailer.exception_notification(RuntimeError("boom"))
        self.assertIn("RuntimeError: boom", message.body)

    def test_exception_notification_names_error_once(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as error:
            message = self.mailer.exception_notification(error, {"old_password": "hunter2", "page": "3"})

        self.assertEqual(message.body.count("RuntimeError: boom"), 1)
        self.assertIn("Traceback (most recent call last)", message.body)
        self.assertIn("page: 3", message.body)
        self.assertNotIn("hunter2", message.body)

    def test_logging_email(self):
        message = self.mailer.logging_email("Reindex finished", {"documents": 12})

        self.assertEqual(message.subject, "Reindex finished")
        self.assertEqual(message.to, ["support@example.org"])
        self.assertIn("documents: 12", message.body)

    def test_account_and_document_csvs(self):
        message = self.mailer.account_and_document_csvs()

        date = timezone.localdate().strftime("%Y-%m-%d")
        self.assertEqual(message.subject, "Accounts (CSVs)")
        self.assertEqual(message.from_email, "no-reply@example.org")
        self.assertEqual(message.to, ["info@example.org"])
        self.assertIn(date, message.body)
        filenames = [attachment[0] for attachment in message.attachments]
        self.assertEqual(filenames, [f"accounts-{date}.csv", f"top-documents-{date}.csv"])
        self.assertEqual([attachment[2] for attachment in message.attachments], ["text/csv", "text/csv"])
        self.assertTrue(message.message().is_multipart())

    def test_transport_failure_propagates(self):
        with mock.patch("django.core.mail.EmailMessage.send", side_effect=ConnectionRefusedError):
            with self.assertRaises(ConnectionRefusedError):
                self.mailer.logging_email("Subject", {})


@override_settings(REPORTS_EMAIL="info@example.org", SUPPORT_EMAIL="support@example.org")
class CommandTestCase(TestCase):
    """Tests for the mail management commands."""

    def test_send_account_csvs(self):
        user = User.objects.create_user(username="jdoe", email="jdoe@example.com", password="testpass123")
        Document.objects.create(account=user.account, title="Budget", access=Document.Access.PUBLIC)
        out = io.StringIO()

        call_command("send_account_csvs", stdout=out)

        self.assertEqual(len(mail.outbox), 1)
        accounts = mail.outbox[0].attachments[0][1]
        if isinstance(accounts, bytes):
            accounts = accounts.decode("utf-8")
        rows = list(csv.reader(io.StringIO(accounts)))
        self.assertEqual(rows[1][2], "jdoe@example.com")
        self.assertIn("info@example.org", out.getvalue())

    def test_send_logging_email(self):
        call_command("send_logging_email", "Nightly import", "documents=4", stdout=io.StringIO())

        self.assertEqual(mail.outbox[0].subject, "Nightly import")
        self.assertIn("documents: 4", mail.outbox[0].body)
