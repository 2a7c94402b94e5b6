"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- twilio.py: Twilio REST API message reader
"""
from .twilio import TwilioAdapter

__all__ = [
    "TwilioAdapter",
]
