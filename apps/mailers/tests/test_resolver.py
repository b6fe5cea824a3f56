"""
Tests for lifecycle mail template selection.
"""

import tempfile
from pathlib import Path

from django.test import SimpleTestCase, override_settings

from apps.mailers.resolver import resolve_template, shared_template, template_for_language


class ResolveTemplateTestCase(SimpleTestCase):
    """Tests for resolve_template."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        root = Path(self.tmp.name)
        for language in ("en", "es"):
            (root / "lifecycle_mailer" / language).mkdir(parents=True)
            (root / "lifecycle_mailer" / language / "reset_request.txt").write_text(language)
        (root / "lifecycle_mailer" / "en" / "login_instructions.txt").write_text("en")
        self.settings_override = override_settings(
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "DIRS": [root],
                    "APP_DIRS": False,
                }
            ]
        )
        self.settings_override.enable()

    def tearDown(self):
        self.settings_override.disable()
        self.tmp.cleanup()

    def test_uses_language_template_when_present(self):
        self.assertEqual(resolve_template("reset_request", "es"), "lifecycle_mailer/es/reset_request.txt")

    def test_falls_back_to_default_template(self):
        self.assertEqual(resolve_template("login_instructions", "es"), "lifecycle_mailer/en/login_instructions.txt")

    def test_default_language_never_checks_other_languages(self):
        self.assertEqual(resolve_template("reset_request", "en"), "lifecycle_mailer/en/reset_request.txt")

    def test_unknown_language_uses_default(self):
        self.assertEqual(resolve_template("reset_request", "../../secrets"), "lifecycle_mailer/en/reset_request.txt")

    def test_missing_default_template_is_still_named(self):
        self.assertEqual(resolve_template("nonexistent", "es"), "lifecycle_mailer/en/nonexistent.txt")

    def test_template_names(self):
        self.assertEqual(template_for_language("contact_us", "fi"), "lifecycle_mailer/fi/contact_us.txt")
        self.assertEqual(shared_template("contact_us"), "lifecycle_mailer/contact_us.txt")


class ShippedTemplateTestCase(SimpleTestCase):
    """resolve_template against the templates installed with the mailers app."""

    def test_spanish_template_found_through_app_loader(self):
        self.assertEqual(resolve_template("reset_request", "es"), "lifecycle_mailer/es/reset_request.txt")

    def test_finnish_falls_back_to_english(self):
        self.assertEqual(resolve_template("reset_request", "fi"), "lifecycle_mailer/en/reset_request.txt")

    def test_untranslated_spanish_template_falls_back(self):
        self.assertEqual(
            resolve_template("membership_notification", "es"), "lifecycle_mailer/en/membership_notification.txt"
        )
