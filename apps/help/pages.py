import re

from django.db import models


class HelpPage(models.TextChoices):
    INDEX = "index", "Introduction"
    TOUR = "tour", "Guided Tour"
    PUBLIC = "public", "The Public Catalog"
    ACCOUNTS = "accounts", "Adding Accounts"
    SEARCHING = "searching", "Searching Documents and Data"
    UPLOADING = "uploading", "Uploading Documents"
    TROUBLESHOOTING = "troubleshooting", "Troubleshooting Failed Uploads"
    MODIFICATION = "modification", "Document Modification"
    NOTES = "notes", "Editing Notes and Sections"
    COLLABORATION = "collaboration", "Collaboration"
    PRIVACY = "privacy", "Privacy"
    PUBLISHING = "publishing", "Publishing & Embedding"
    API = "api", "API"


class HelpPageConverter:
    """URL converter that only matches known help pages."""

    regex = "|".join(re.escape(value) for value in HelpPage.values)

    def to_python(self, value):
        return HelpPage(value)

    def to_url(self, value):
        return HelpPage(value).value
