"""
Lifecycle mail: account activation, password resets, review invitations,
processing notices, support relays and operational reports.
"""
