"""
Localized help pages and the contact form.
"""
