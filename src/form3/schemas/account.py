"""
Account resource schemas for the Form3 organisation API.

Maps to the `accounts` resource:
- Account: the resource object (id, organisation_id, type, version, attributes)
- AccountAttributes: descriptive fields, passed through untouched
- AccountEnvelope: the {"data": {...}} wrapper used on every request/response

Optional fields are None when absent and are left out of the encoded JSON.
Any other value (including "", [] and False) is encoded as-is, so an
encode/decode cycle never turns "absent" into "present but empty".
"""

from dataclasses import dataclass, fields
from typing import Any

ACCOUNT_TYPE = "accounts"


def _from_known_keys(cls, data: dict[str, Any]) -> dict[str, Any]:
    """Pick the keys of `data` that are fields of dataclass `cls`."""
    if not isinstance(data, dict):
        raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class AccountAttributes:
    """
    Attributes of a single account.

    No field is validated client-side; the API performs all validation.
    """

    account_classification: str | None = None  # Personal, Business
    account_matching_opt_out: bool | None = None
    account_number: str | None = None
    alternative_names: list[str] | None = None
    bank_id: str | None = None
    bank_id_code: str | None = None
    base_currency: str | None = None
    bic: str | None = None
    country: str | None = None  # ISO 3166-1 alpha-2
    iban: str | None = None
    joint_account: bool | None = None
    name: list[str] | None = None
    secondary_identification: str | None = None
    status: str | None = None  # pending, confirmed, failed
    switched: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to Form3 API JSON format."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = list(value) if isinstance(value, list) else value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccountAttributes":
        """Create from Form3 API response, ignoring unknown keys."""
        return cls(**_from_known_keys(cls, data))


@dataclass
class Account:
    """Account resource in the Form3 organisation section."""

    id: str | None = None
    organisation_id: str | None = None
    type: str | None = ACCOUNT_TYPE
    version: int | None = None  # Absent on creation, required for delete
    attributes: AccountAttributes | None = None

    def __str__(self) -> str:
        return f"Account(id={self.id}, version={self.version})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to Form3 API JSON format."""
        result: dict[str, Any] = {}
        optional_fields = [
            ("id", self.id),
            ("organisation_id", self.organisation_id),
            ("type", self.type),
            ("version", self.version),
        ]
        for field_name, value in optional_fields:
            if value is not None:
                result[field_name] = value

        if self.attributes is not None:
            result["attributes"] = self.attributes.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        """Create from Form3 API response (the object under "data")."""
        known = _from_known_keys(cls, data)
        attributes = known.pop("attributes", None)
        known.setdefault("type", None)
        return cls(
            attributes=AccountAttributes.from_dict(attributes) if attributes is not None else None,
            **known,
        )


@dataclass
class AccountEnvelope:
    """Request/response wrapper: {"data": <Account>}."""

    data: Account

    def to_dict(self) -> dict[str, Any]:
        """Convert to Form3 API JSON format."""
        return {"data": self.data.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccountEnvelope":
        """Create from Form3 API response body."""
        if not isinstance(data, dict):
            raise TypeError(f"AccountEnvelope expects a JSON object, got {type(data).__name__}")
        if "data" not in data:
            raise KeyError("data")
        return cls(data=Account.from_dict(data["data"]))
