"""
Shared building blocks: language fallback, message translations,
throttling and exception alerts.
"""
