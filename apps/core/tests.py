"""
Core tests - language fallback, translations and exception alerts.
"""

import tempfile
from pathlib import Path
from types import SimpleNamespace

from django.core import mail
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from apps.core.i18n import translate
from apps.core.language import DEFAULT_LANGUAGE, language_for, normalize_language, resolve_localized
from apps.core.middleware import ExceptionNotificationMiddleware


class LanguageTestCase(SimpleTestCase):
    """Tests for language normalization and fallback."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        (self.root / "en").mkdir()
        (self.root / "es").mkdir()
        (self.root / "en" / "page.md").write_text("english")
        (self.root / "es" / "page.md").write_text("spanish")

    def tearDown(self):
        self.tmp.cleanup()

    def build(self, name):
        return lambda language: self.root / language / f"{name}.md"

    def test_unknown_language_becomes_default(self):
        self.assertEqual(normalize_language("xx"), DEFAULT_LANGUAGE)
        self.assertEqual(normalize_language(None), DEFAULT_LANGUAGE)
        self.assertEqual(normalize_language("../etc"), DEFAULT_LANGUAGE)

    def test_known_language_is_kept(self):
        self.assertEqual(normalize_language("es"), "es")

    def test_language_for_anonymous_is_default(self):
        self.assertEqual(language_for(None), DEFAULT_LANGUAGE)
        self.assertEqual(language_for(SimpleNamespace(language="fi")), "fi")

    def test_resolve_prefers_requested_language(self):
        language, path = resolve_localized(self.build("page"), "es")
        self.assertEqual(language, "es")
        self.assertEqual(path.read_text(), "spanish")

    def test_resolve_falls_back_to_default(self):
        language, path = resolve_localized(self.build("page"), "fi")
        self.assertEqual(language, DEFAULT_LANGUAGE)
        self.assertEqual(path.read_text(), "english")

    def test_resolve_returns_missing_default_path(self):
        language, path = resolve_localized(self.build("missing"), "es")
        self.assertEqual(language, DEFAULT_LANGUAGE)
        self.assertFalse(path.exists())

    def test_resolve_with_custom_existence_check(self):
        available = {"es/reset"}
        language, name = resolve_localized(lambda lang: f"{lang}/reset", "es", exists=available.__contains__)
        self.assertEqual((language, name), ("es", "es/reset"))
        language, name = resolve_localized(lambda lang: f"{lang}/login", "es", exists=available.__contains__)
        self.assertEqual((language, name), (DEFAULT_LANGUAGE, "en/login"))


@override_settings(APP_NAME="DocumentCloud")
class TranslateTestCase(SimpleTestCase):
    """Tests for translated message lookup."""

    def test_translates_with_positional_arguments(self):
        self.assertEqual(
            translate("en", "review_x_documents", 2, "Budget"),
            'Review 2 document(s) on DocumentCloud: "Budget"',
        )

    def test_uses_account_language(self):
        account = SimpleNamespace(language="es")
        self.assertEqual(translate(account, "password_reset"), "Restablecer la contraseña de DocumentCloud")

    def test_missing_key_falls_back_to_default_language(self):
        self.assertEqual(translate("fi", "password_reset"), "DocumentCloud password reset")

    def test_unknown_key_raises(self):
        with self.assertRaises(KeyError):
            translate("en", "no_such_message")


class ExceptionNotificationMiddlewareTestCase(TestCase):
    """Tests for mailing unhandled exceptions."""

    def setUp(self):
        self.middleware = ExceptionNotificationMiddleware(lambda request: None)
        self.factory = RequestFactory()

    @override_settings(EXCEPTION_NOTIFICATIONS=True)
    def test_mails_exception_without_password(self):
        request = self.factory.post("/upload/", {"title": "Budget", "password": "secret"})

        result = self.middleware.process_exception(request, ValueError("bad upload"))

        self.assertIsNone(result)
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("ValueError", mail.outbox[0].subject)
        self.assertIn("title: Budget", mail.outbox[0].body)
        self.assertNotIn("secret", mail.outbox[0].body)

    @override_settings(EXCEPTION_NOTIFICATIONS=True)
    def test_mails_exception_without_password_like_fields(self):
        """Signup and password change forms post password1, password2 and old_password."""
        request = self.factory.post(
            "/auth/signup/",
            {
                "username": "reporter",
                "password1": "first-secret",
                "password2": "second-secret",
                "old_password": "old-secret",
                "Password_Confirm": "confirm-secret",
            },
        )

        self.middleware.process_exception(request, RuntimeError("signup failed"))

        body = mail.outbox[0].body
        self.assertIn("username: reporter", body)
        self.assertNotIn("secret", body)
        self.assertNotIn("password", body.lower())

    @override_settings(EXCEPTION_NOTIFICATIONS=False)
    def test_disabled_sends_nothing(self):
        request = self.factory.get("/")
        self.middleware.process_exception(request, ValueError("bad"))
        self.assertEqual(len(mail.outbox), 0)
