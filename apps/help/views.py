"""
Help documentation views.

Renders markdown documentation files from apps/help/docs/ in the
requesting account's language, without any page layout.
"""

import logging

from django.http import HttpResponse, HttpResponseNotFound, JsonResponse
from django.views.decorators.http import require_GET

from apps.accounts.utils import get_current_account
from apps.core.language import language_for
from apps.help.content import load_page, render_markdown
from apps.help.pages import HelpPage

logger = logging.getLogger(__name__)


@require_GET
def help_index(request):
    """List the help pages and their titles."""
    return JsonResponse({"pages": [{"page": value, "title": label} for value, label in HelpPage.choices]})


@require_GET
def help_page(request, page: HelpPage):
    """Render a single help page as an HTML fragment."""
    language = language_for(get_current_account(request))
    content = load_page(page, language)
    if content is None:
        logger.warning("Help page %s has no content for %s or the default language", page.value, language)
        return HttpResponseNotFound()

    return HttpResponse(render_markdown(content), content_type="text/html; charset=utf-8")
