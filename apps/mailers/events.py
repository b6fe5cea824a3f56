"""
Mail events and their configuration.

Each event names its template, the sender class and, for localized events,
the message key of its subject line.
"""

from dataclasses import dataclass

from django.db import models


class Sender(models.TextChoices):
    SUPPORT = "support", "Support"
    NO_REPLY = "no_reply", "No reply"


class MailEvent(models.TextChoices):
    LOGIN_INSTRUCTIONS = "login_instructions", "Login instructions"
    MEMBERSHIP_NOTIFICATION = "membership_notification", "Membership notification"
    REVIEWER_INSTRUCTIONS = "reviewer_instructions", "Reviewer instructions"
    RESET_REQUEST = "reset_request", "Password reset request"
    CONTACT_US = "contact_us", "Contact form message"
    EXCEPTION_NOTIFICATION = "exception_notification", "Exception notification"
    DOCUMENTS_FINISHED_PROCESSING = "documents_finished_processing", "Documents finished processing"
    ACCOUNT_AND_DOCUMENT_CSVS = "account_and_document_csvs", "Account and document CSVs"
    LOGGING_EMAIL = "logging_email", "Logging email"


@dataclass(frozen=True)
class EventConfig:
    template: str
    sender: str
    subject_key: str | None = None
    localized: bool = False


EVENTS = {
    MailEvent.LOGIN_INSTRUCTIONS: EventConfig(
        template="login_instructions",
        sender=Sender.SUPPORT,
        subject_key="welcome_to_document_cloud",
        localized=True,
    ),
    MailEvent.MEMBERSHIP_NOTIFICATION: EventConfig(
        template="membership_notification",
        sender=Sender.SUPPORT,
        subject_key="youve_been_added_to_x",
        localized=True,
    ),
    MailEvent.REVIEWER_INSTRUCTIONS: EventConfig(
        template="reviewer_instructions",
        sender=Sender.SUPPORT,
        subject_key="review_x_documents",
        localized=True,
    ),
    MailEvent.RESET_REQUEST: EventConfig(
        template="reset_request",
        sender=Sender.SUPPORT,
        subject_key="password_reset",
        localized=True,
    ),
    MailEvent.CONTACT_US: EventConfig(template="contact_us", sender=Sender.NO_REPLY),
    MailEvent.EXCEPTION_NOTIFICATION: EventConfig(template="exception_notification", sender=Sender.NO_REPLY),
    MailEvent.DOCUMENTS_FINISHED_PROCESSING: EventConfig(
        template="documents_finished_processing",
        sender=Sender.SUPPORT,
        subject_key="documents_are_ready",
        localized=True,
    ),
    MailEvent.ACCOUNT_AND_DOCUMENT_CSVS: EventConfig(template="account_and_document_csvs", sender=Sender.NO_REPLY),
    MailEvent.LOGGING_EMAIL: EventConfig(template="logging_email", sender=Sender.NO_REPLY),
}
