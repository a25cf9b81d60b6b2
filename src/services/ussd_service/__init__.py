"""
USSD-колбэки шлюза.
"""
