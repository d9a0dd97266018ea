"""
Form3 REST API Client.

Provides:
- Create accounts (POST /v1/organisation/accounts)
- Fetch accounts (GET /v1/organisation/accounts/{id})
- Delete accounts (DELETE /v1/organisation/accounts/{id}?version={n})
- Generic request building/execution for other endpoints

Non-success responses surface as Form3APIError carrying the HTTP status.
"""

from .client import (
    Form3APIError,
    Form3Client,
    Form3DeserializationError,
    Form3Error,
    Form3SerializationError,
    Form3TransportError,
)
from .transport import SessionTransport, Transport

__all__ = [
    "Form3Client",
    "Form3Error",
    "Form3APIError",
    "Form3TransportError",
    "Form3SerializationError",
    "Form3DeserializationError",
    "SessionTransport",
    "Transport",
]
