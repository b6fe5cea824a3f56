"""
Lifecycle mailer.

Composes templated mail for account and document events and hands it to
Django's mail connection. Delivery failures are raised by the connection;
nothing here retries or queues.
"""

import logging
import socket
import traceback

from django.conf import settings
from django.core.mail import EmailMessage
from django.template.loader import render_to_string
from django.utils import timezone

from apps.accounts import statistics as default_statistics
from apps.core.i18n import translate
from apps.core.language import language_for
from apps.mailers.events import EVENTS, MailEvent, Sender
from apps.mailers.resolver import resolve_template, shared_template

logger = logging.getLogger(__name__)

# Any parameter whose name contains one of these is left out of exception mail
REDACTED_PARAMS = ("password",)


def _sender_address(sender):
    if sender == Sender.SUPPORT:
        return settings.SUPPORT_EMAIL
    return settings.NO_REPLY_EMAIL


class LifecycleMailer:
    """
    Sends lifecycle mail to accounts and to the support team.

    Every public method composes one message, sends it and returns it.

    Args:
        connection: Mail connection to send through (Django's default if None)
        statistics: Provider of accounts_csv() and top_documents_csv()
        translator: Callable(language_or_account, key, *args) returning subject text
    """

    def __init__(self, connection=None, statistics=None, translator=None):
        self.connection = connection
        self.statistics = statistics or default_statistics
        self.translator = translator or translate

    # Account lifecycle

    def login_instructions(self, account, admin=None):
        """Welcome a new account with a link to activate it and set a password."""
        language = language_for(account)
        return self._send(
            MailEvent.LOGIN_INSTRUCTIONS,
            language=language,
            subject=self._subject(MailEvent.LOGIN_INSTRUCTIONS, language),
            to=[account.email],
            cc=[admin.email] if admin else [],
            context={
                "admin": admin,
                "account": account,
                "key": account.get_security_key().key,
                "organization_name": account.organization_name,
            },
        )

    def membership_notification(self, account, organization, admin=None):
        language = language_for(account)
        return self._send(
            MailEvent.MEMBERSHIP_NOTIFICATION,
            language=language,
            subject=self._subject(MailEvent.MEMBERSHIP_NOTIFICATION, language, organization.name),
            to=[account.email],
            context={
                "admin": admin,
                "account": account,
                "organization_name": organization.name,
            },
        )

    def reviewer_instructions(self, documents, inviter_account, reviewer_account=None, message=None, key=""):
        """
        Invite a reviewer to annotate documents through a private link.

        The inviter is copied. Without a reviewer account only the inviter
        receives the mail.
        """
        documents = list(documents)
        language = language_for(inviter_account)
        return self._send(
            MailEvent.REVIEWER_INSTRUCTIONS,
            language=language,
            subject=self._subject(MailEvent.REVIEWER_INSTRUCTIONS, language, len(documents), documents[0].title),
            to=[reviewer_account.email] if reviewer_account else [],
            cc=[inviter_account.email],
            context={
                "documents": documents,
                "key": key,
                "organization_name": documents[0].account.organization_name,
                "account_exists": bool(reviewer_account and not reviewer_account.is_reviewer),
                "inviter_account": inviter_account,
                "reviewer_account": reviewer_account,
                "message": message,
            },
        )

    def reset_request(self, account):
        """Mail a fresh security key for resetting the account's password."""
        language = language_for(account)
        return self._send(
            MailEvent.RESET_REQUEST,
            language=language,
            subject=self._subject(MailEvent.RESET_REQUEST, language),
            to=[account.email],
            context={
                "account": account,
                "key": account.issue_security_key().key,
            },
        )

    def documents_finished_processing(self, account, document_count):
        language = language_for(account)
        return self._send(
            MailEvent.DOCUMENTS_FINISHED_PROCESSING,
            language=language,
            subject=self._subject(MailEvent.DOCUMENTS_FINISHED_PROCESSING, language),
            to=[account.email],
            context={
                "account": account,
                "count": document_count,
            },
        )

    # Support and operations

    def contact_us(self, account, params):
        """Relay a contact form message to support, replying to the sender."""
        email = params.get("email") or ""
        name = account.full_name if account else email
        reply_to = account.email if account else email
        return self._send(
            MailEvent.CONTACT_US,
            subject=f"{settings.APP_NAME} message from {name}",
            to=[settings.SUPPORT_EMAIL],
            reply_to=[reply_to] if reply_to else [],
            context={
                "account": account,
                "message": params.get("message"),
                "email": email,
            },
        )

    def exception_notification(self, error, params=None):
        """Mail an exception report to support, without any password-like parameter."""
        if params is not None:
            params = {
                name: value
                for name, value in params.items()
                if not any(redacted in str(name).lower() for redacted in REDACTED_PARAMS)
            }

        subject = (
            f"{settings.APP_NAME} exception ({settings.ENVIRONMENT}:{socket.gethostname()}): {type(error).__name__}"
        )
        return self._send(
            MailEvent.EXCEPTION_NOTIFICATION,
            subject=subject,
            to=[settings.SUPPORT_EMAIL],
            context={
                "params": params,
                "error": error,
                "traceback": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            },
        )

    def account_and_document_csvs(self):
        """Mail the accounts and top documents CSVs to the reports address."""
        date = timezone.localdate().strftime("%Y-%m-%d")
        message = self._compose(
            MailEvent.ACCOUNT_AND_DOCUMENT_CSVS,
            subject="Accounts (CSVs)",
            to=[settings.REPORTS_EMAIL],
            context={"date": timezone.now()},
        )
        message.attach(f"accounts-{date}.csv", self.statistics.accounts_csv(), "text/csv")
        message.attach(f"top-documents-{date}.csv", self.statistics.top_documents_csv(), "text/csv")
        return self._deliver(MailEvent.ACCOUNT_AND_DOCUMENT_CSVS, message)

    def logging_email(self, email_subject, args):
        return self._send(
            MailEvent.LOGGING_EMAIL,
            subject=email_subject,
            to=[settings.SUPPORT_EMAIL],
            context={"args": args},
        )

    # Helpers

    def _subject(self, event, language, *args):
        return self.translator(language, EVENTS[event].subject_key, *args)

    def _compose(self, event, *, subject, to, context, language=None, cc=None, reply_to=None):
        config = EVENTS[event]
        if config.localized:
            template = resolve_template(config.template, language)
        else:
            template = shared_template(config.template)

        context = {"app_name": settings.APP_NAME, "site_url": settings.SITE_URL, **context}
        return EmailMessage(
            subject=subject,
            body=render_to_string(template, context),
            from_email=_sender_address(config.sender),
            to=to,
            cc=cc or [],
            reply_to=reply_to or [],
            connection=self.connection,
        )

    def _deliver(self, event, message):
        logger.info("Sending %s mail to %s", event.value, ", ".join(message.recipients()) or "no recipients")
        message.send(fail_silently=False)
        return message

    def _send(self, event, **kwargs):
        return self._deliver(event, self._compose(event, **kwargs))
