"""
Note Taking API - multi-user note storage with tagging

Users register with an email, log in for a short-lived JWT plus a rotating
refresh token, and manage private notes that can carry shared tags.
"""

__version__ = "1.0.0"
