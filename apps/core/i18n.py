"""
Translated message strings for lifecycle mail.

Strings are keyed by language, then by message key. Positional arguments
use {0}, {1} placeholders; {app} is the application name.
"""

from django.conf import settings

from apps.core.language import DEFAULT_LANGUAGE, language_for, normalize_language

MESSAGES = {
    "en": {
        "welcome_to_document_cloud": "Welcome to {app}",
        "youve_been_added_to_x": "You've been added to {0} on {app}",
        "review_x_documents": 'Review {0} document(s) on {app}: "{1}"',
        "password_reset": "{app} password reset",
        "documents_are_ready": "Your documents are ready",
    },
    "es": {
        "welcome_to_document_cloud": "Bienvenido a {app}",
        "youve_been_added_to_x": "Has sido añadido a {0} en {app}",
        "review_x_documents": 'Revisar {0} documento(s) en {app}: "{1}"',
        "password_reset": "Restablecer la contraseña de {app}",
        "documents_are_ready": "Tus documentos están listos",
    },
    "fi": {
        "welcome_to_document_cloud": "Tervetuloa {app}-palveluun",
        "youve_been_added_to_x": "Sinut on lisätty organisaatioon {0} ({app})",
        "documents_are_ready": "Dokumenttisi ovat valmiita",
    },
}


def translate(target, key: str, *args) -> str:
    """
    Look up a message for a language code or an account.

    Missing keys fall back to the default language. A key that the default
    language lacks raises KeyError.
    """
    language = normalize_language(target) if isinstance(target, str) else language_for(target)
    template = MESSAGES.get(language, {}).get(key)
    if template is None:
        template = MESSAGES[DEFAULT_LANGUAGE][key]
    return template.format(*args, app=settings.APP_NAME)
