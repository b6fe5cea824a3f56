"""
Help app tests - localized pages and the contact form.
"""

import tempfile
from pathlib import Path

from django.contrib.auth import get_user_model
from django.core import mail
from django.core.cache import cache
from django.test import Client, TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from apps.accounts.models import Account
from apps.help.content import load_page, render_markdown
from apps.help.pages import HelpPage

User = get_user_model()


def make_account(username, language="en", **user_fields):
    user = User.objects.create_user(
        username=username, email=f"{username}@example.com", password="testpass123", **user_fields
    )
    account = Account.objects.get(user=user)
    account.language = language
    account.save()
    return account


class HelpDocsTestCase(TestCase):
    """Base test case with a temporary help docs directory."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.docs = Path(self.tmp.name)
        self.settings_override = override_settings(HELP_DOCS_DIR=self.docs)
        self.settings_override.enable()
        self.client = Client()

    def tearDown(self):
        self.settings_override.disable()
        self.tmp.cleanup()

    def write(self, language, name, text):
        directory = self.docs / language
        directory.mkdir(exist_ok=True)
        (directory / name).write_text(text, encoding="utf-8")

    def get_page(self, page):
        return self.client.get(reverse("help:page", kwargs={"page": page}))


class HelpPageViewTestCase(HelpDocsTestCase):
    """Tests for rendering help pages."""

    def setUp(self):
        super().setUp()
        self.write("en", "accounts.md", "# Adding Accounts\n")
        self.write("en", "accounts_links.md", "\n* [Privacy](#help/privacy)\n")
        self.write("en", "tour.md", "# Guided Tour\n")
        self.write("es", "tour.md", "# Visita guiada\n")
        self.write("es", "tour_links.md", "\n* [Buscar](#help/searching)\n")

    def test_anonymous_gets_default_language(self):
        response = self.get_page("tour")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/html; charset=utf-8")
        self.assertEqual(response.content.decode(), render_markdown("# Guided Tour\n"))

    def test_account_language_is_used_when_present(self):
        account = make_account("lucia", language="es")
        self.client.force_login(account.user)

        response = self.get_page("tour")

        html = response.content.decode()
        self.assertIn("Visita guiada", html)
        self.assertNotIn("Guided Tour", html)
        self.assertLess(html.index("Visita guiada"), html.index("Buscar"))

    def test_falls_back_to_default_language(self):
        account = make_account("lucia", language="es")
        self.client.force_login(account.user)

        response = self.get_page("accounts")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.content.decode(),
            render_markdown("# Adding Accounts\n\n* [Privacy](#help/privacy)\n"),
        )

    def test_links_are_appended_after_primary_content(self):
        html = self.get_page("accounts").content.decode()
        self.assertLess(html.index("Adding Accounts"), html.index("Privacy"))

    def test_missing_page_is_not_found(self):
        response = self.get_page("api")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b"")

    def test_missing_page_in_every_language_is_not_found_for_account(self):
        account = make_account("lucia", language="es")
        self.client.force_login(account.user)

        self.assertEqual(self.get_page("privacy").status_code, 404)

    def test_unknown_page_does_not_resolve(self):
        response = self.client.get("/help/../../etc/passwd/")
        self.assertEqual(response.status_code, 404)
        response = self.client.get("/help/nonexistent/")
        self.assertEqual(response.status_code, 404)

    def test_load_page_ignores_unknown_language(self):
        self.assertEqual(load_page(HelpPage.TOUR, "../es"), "# Guided Tour\n")


class ShippedHelpPagesTestCase(TestCase):
    """Every help page ships with default language content."""

    def test_every_page_renders(self):
        client = Client()
        for page in HelpPage:
            with self.subTest(page=page.value):
                response = client.get(reverse("help:page", kwargs={"page": page}))
                self.assertEqual(response.status_code, 200)
                self.assertIn("<h1", response.content.decode())

    def test_index_lists_pages(self):
        response = Client().get(reverse("help:index"))
        pages = response.json()["pages"]
        self.assertEqual(len(pages), len(HelpPage))
        self.assertIn({"page": "public", "title": "The Public Catalog"}, pages)


class ContactUsTestCase(TestCase):
    """Tests for the contact form relay."""

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.url = reverse("help:contact_us")

    def test_missing_message_is_rejected(self):
        response = self.client.post(self.url, {"email": "reader@example.com"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(mail.outbox), 0)

    def test_blank_message_is_rejected(self):
        response = self.client.post(self.url, {"message": "", "email": "reader@example.com"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(mail.outbox), 0)

    @override_settings(APP_NAME="DocumentCloud", SUPPORT_EMAIL="support@example.org")
    def test_anonymous_message_is_relayed(self):
        response = self.client.post(
            self.url, {"message": "The viewer is broken", "email": "reader@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"")
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.subject, "DocumentCloud message from reader@example.com")
        self.assertEqual(message.to, ["support@example.org"])
        self.assertEqual(message.reply_to, ["reader@example.com"])
        self.assertIn("The viewer is broken", message.body)

    @override_settings(APP_NAME="DocumentCloud")
    def test_account_message_uses_account_identity(self):
        account = make_account("jdoe", first_name="Jane", last_name="Doe")
        self.client.force_login(account.user)

        response = self.client.post(self.url, {"message": "Hello"}, format="json")

        self.assertEqual(response.status_code, 200)
        message = mail.outbox[0]
        self.assertEqual(message.subject, "DocumentCloud message from Jane Doe")
        self.assertEqual(message.reply_to, ["jdoe@example.com"])

    def test_malformed_email_is_rejected(self):
        response = self.client.post(self.url, {"message": "Hello", "email": "not-an-email"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.json())
        self.assertEqual(len(mail.outbox), 0)

    def test_email_with_header_injection_is_rejected(self):
        response = self.client.post(
            self.url, {"message": "Hello", "email": "reader@example.com\nBcc: victim@example.net"}, format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(mail.outbox), 0)
