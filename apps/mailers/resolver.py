"""
Template selection for lifecycle mail.

Localized templates live in lifecycle_mailer/<language>/<name>.txt, shared
ones in lifecycle_mailer/<name>.txt. Only plain text templates are looked up;
HTML mail would need its own suffix here.
"""

from django.template import TemplateDoesNotExist
from django.template.loader import get_template

from apps.core.language import resolve_localized

TEMPLATE_DIR = "lifecycle_mailer"
TEMPLATE_SUFFIX = ".txt"


def template_for_language(name: str, language: str) -> str:
    return f"{TEMPLATE_DIR}/{language}/{name}{TEMPLATE_SUFFIX}"


def shared_template(name: str) -> str:
    return f"{TEMPLATE_DIR}/{name}{TEMPLATE_SUFFIX}"


def _template_exists(template_name: str) -> bool:
    # Same loaders render_to_string uses
    try:
        get_template(template_name)
    except TemplateDoesNotExist:
        return False
    return True


def resolve_template(name: str, language: str | None) -> str:
    """
    Return the template name to render for a language.

    Uses the language's template when the template loaders find one, else the
    default language's. The default template is not checked; a missing one
    surfaces as TemplateDoesNotExist when rendering.
    """
    _, template = resolve_localized(
        lambda lang: template_for_language(name, lang), language, exists=_template_exists
    )
    return template
