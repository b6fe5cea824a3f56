"""
Language fallback policy.

Prefer the account's language; when the artifact (help page, mail template)
is missing for it, use the default language instead.
"""

from collections.abc import Callable
from pathlib import Path

from django.db import models


class Language(models.TextChoices):
    ENGLISH = "en", "English"
    SPANISH = "es", "Español"
    FINNISH = "fi", "Suomi"


DEFAULT_LANGUAGE = Language.ENGLISH.value


def normalize_language(code: str | None) -> str:
    """
    Return a known language code, or the default one.

    Only codes from Language ever reach path construction.
    """
    if code in Language.values:
        return code
    return DEFAULT_LANGUAGE


def language_for(account) -> str:
    """Language of an account, or the default for anonymous requests."""
    if account is None:
        return DEFAULT_LANGUAGE
    return normalize_language(account.language)


def resolve_localized(build: Callable, language: str | None, exists: Callable | None = None) -> tuple:
    """
    Pick the localized artifact for a language.

    `build` maps a language code to an artifact (a path or a template name).
    If `exists` says the artifact for `language` is missing, the default
    language artifact is returned instead. `exists` defaults to checking the
    path on disk. Whether the default artifact exists is left to the caller.

    Returns (language, artifact) for the language that was chosen.
    """
    exists = exists or Path.exists
    language = normalize_language(language)
    artifact = build(language)
    if language != DEFAULT_LANGUAGE and not exists(artifact):
        language = DEFAULT_LANGUAGE
        artifact = build(language)
    return language, artifact
