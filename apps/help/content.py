"""
Help content resolution.

Pages are markdown files under HELP_DOCS_DIR, one directory per language:

    <HELP_DOCS_DIR>/<language>/<page>.md        primary body
    <HELP_DOCS_DIR>/<language>/<page>_links.md  optional links appended after it
"""

import logging
from pathlib import Path

import markdown
from django.conf import settings

from apps.core.language import resolve_localized
from apps.help.pages import HelpPage

logger = logging.getLogger(__name__)


def help_path(language: str, page: HelpPage) -> Path:
    return Path(settings.HELP_DOCS_DIR) / language / f"{HelpPage(page).value}.md"


def links_path(language: str, page: HelpPage) -> Path:
    return Path(settings.HELP_DOCS_DIR) / language / f"{HelpPage(page).value}_links.md"


def load_page(page: HelpPage, language: str | None) -> str | None:
    """
    Read the markdown for a page, falling back to the default language.

    The links fragment is taken from the same language as the body.
    Returns None when even the default language has no such page.
    """
    language, path = resolve_localized(lambda lang: help_path(lang, page), language)
    if not path.exists():
        return None

    contents = path.read_text(encoding="utf-8")
    links = links_path(language, page)
    if links.exists():
        contents += links.read_text(encoding="utf-8")

    logger.debug("Loaded help page %s (%s)", HelpPage(page).value, language)
    return contents


def render_markdown(content: str) -> str:
    """Render markdown content to an HTML fragment."""
    return markdown.markdown(content, extensions=["fenced_code", "tables"])
