"""
Accounts, organizations and security keys.
"""
