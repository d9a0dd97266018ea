"""
Form3 REST API client.

Implements create, fetch and delete on the account resource on top of a
small request/response layer with a pluggable transport.
"""

import logging

from .client import (
    Form3APIError,
    Form3Client,
    Form3DeserializationError,
    Form3Error,
    Form3SerializationError,
    Form3TransportError,
    SessionTransport,
    Transport,
)
from .schemas import Account, AccountAttributes, AccountEnvelope

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Account",
    "AccountAttributes",
    "AccountEnvelope",
    "Form3APIError",
    "Form3Client",
    "Form3DeserializationError",
    "Form3Error",
    "Form3SerializationError",
    "Form3TransportError",
    "SessionTransport",
    "Transport",
]
