"""Test fixtures and utilities."""

import os

import pytest

from fixtures import FakeAccountsAPI
from form3 import AccountAttributes, Form3Client
from form3.config import load_config

BASE_URL = "http://form3.test:8080"


def required_attributes() -> AccountAttributes:
    """Minimal attributes the API accepts."""
    return AccountAttributes(country="NL", name=["L. Mikolajczak"])


def optional_attributes() -> AccountAttributes:
    """Attributes with every optional field set."""
    return AccountAttributes(
        account_classification="Personal",
        account_matching_opt_out=False,
        account_number="123654",
        alternative_names=["Alternative Names"],
        bank_id="ABNA",
        bank_id_code="ABNANL",
        base_currency="EUR",
        bic="ABNANL2A",
        country="NL",
        iban="NL91ABNA0417164300",
        joint_account=False,
        name=["L. Mikolajczak"],
        secondary_identification="Secondary Identification",
        status="pending",
        switched=False,
    )


@pytest.fixture
def attributes_required() -> AccountAttributes:
    return required_attributes()


@pytest.fixture
def attributes_optional() -> AccountAttributes:
    return optional_attributes()


@pytest.fixture
def fake_api() -> FakeAccountsAPI:
    """In-memory Form3 accounts API."""
    return FakeAccountsAPI()


@pytest.fixture
def fake_client(fake_api) -> Form3Client:
    """Client wired to the in-memory accounts API."""
    return Form3Client(BASE_URL, transport=fake_api)


@pytest.fixture
def client() -> Form3Client:
    """Client using the default requests transport (mock with responses)."""
    return Form3Client(BASE_URL)


@pytest.fixture
def live_client() -> Form3Client:
    """Client for a running Form3 API; skipped unless FORM3_API_BASE_URL is set."""
    if not os.environ.get("FORM3_API_BASE_URL"):
        pytest.skip("FORM3_API_BASE_URL not set")
    return Form3Client.from_config(load_config())
