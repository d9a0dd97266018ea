"""
Resource schemas for the Form3 API.

Every resource travels inside a {"data": ...} envelope.
"""

from .account import ACCOUNT_TYPE, Account, AccountAttributes, AccountEnvelope

__all__ = [
    "ACCOUNT_TYPE",
    "Account",
    "AccountAttributes",
    "AccountEnvelope",
]
