"""
Form3 API client implementation.
"""

import json
import logging
import uuid
from typing import Any

import requests

from ..config import Form3Config
from ..schemas.account import ACCOUNT_TYPE, Account, AccountAttributes, AccountEnvelope
from .transport import SessionTransport, Transport

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/vnd.api+json"
ACCOUNTS_ENDPOINT = "/v1/organisation/accounts"


class Form3Error(Exception):
    """Base exception for Form3 client errors."""

    pass


class Form3TransportError(Form3Error):
    """Failed to reach Form3 (connection refused, DNS failure, timeout)."""

    pass


class Form3SerializationError(Form3Error):
    """Request payload could not be encoded as JSON."""

    pass


class Form3DeserializationError(Form3Error):
    """Response body could not be decoded into the expected structure."""

    def __init__(self, body: str, cause: Exception):
        self.body = body
        self.cause = cause
        super().__init__(f"json {body}, error: {cause}")


class Form3APIError(Form3Error):
    """
    API returned a non-success response.

    status_code comes from the HTTP response; error_code and error_message
    come from the JSON body and are None when the body carries neither.
    """

    def __init__(
        self,
        status_code: int,
        error_code: int | None = None,
        error_message: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(
            f"http {status_code}: code: {error_code or 0}, message={error_message or ''}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Form3APIError):
            return NotImplemented
        return (self.status_code, self.error_code, self.error_message) == (
            other.status_code,
            other.error_code,
            other.error_message,
        )

    __hash__ = Exception.__hash__


def new_account_id() -> str:
    """Generate a fresh client-side account identifier."""
    return str(uuid.uuid4())


class Form3Client:
    """
    Client for the Form3 REST API.

    Features:
    - Generic request building and execution (new_request / execute)
    - Create, fetch and delete on the account resource
    - Pluggable transport (defaults to requests with a 10s timeout)

    The client holds no mutable state after construction, so one instance can
    be shared between threads as long as its transport can.
    """

    def __init__(self, base_url: str, transport: Transport | None = None):
        """
        Initialize Form3 client.

        Args:
            base_url: Form3 API URL (e.g., "http://localhost:8080")
            transport: Custom transport; a SessionTransport is used if omitted
        """
        self._base_url = base_url.rstrip("/")
        self._transport = transport if transport is not None else SessionTransport()

    @classmethod
    def from_config(cls, config: Form3Config) -> "Form3Client":
        """Build a client from loaded configuration."""
        return cls(config.base_url, transport=SessionTransport(timeout=config.timeout))

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def new_request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
    ) -> requests.PreparedRequest:
        """
        Build a request for base_url + endpoint.

        Args:
            method: HTTP method
            endpoint: Path (and query) appended verbatim to the base URL
            payload: Mapping or object with to_dict(); None sends no body

        Returns:
            Prepared request, not yet sent

        Raises:
            Form3SerializationError: If the payload cannot be encoded
        """
        url = f"{self._base_url}{endpoint}"
        if payload is None:
            return requests.Request(method, url).prepare()
        return requests.Request(method, url, data=self._marshal(payload)).prepare()

    def execute(
        self,
        request: requests.PreparedRequest,
        headers: dict[str, str] | None = None,
        target: Any = None,
    ) -> Any:
        """
        Send a request and interpret the response.

        Args:
            request: Request built by new_request
            headers: Headers to set, each replacing any existing value
            target: Class with from_dict() to decode a success body into;
                the decoded JSON is returned as-is if omitted

        Returns:
            Decoded body for 200/201, None for an empty body or 204

        Raises:
            Form3TransportError: If the request could not be sent
            Form3DeserializationError: If the response body does not decode
            Form3APIError: For any other status code
        """
        for key, value in (headers or {}).items():
            request.headers[key] = value

        logger.debug(f"API Request: {request.method} {request.url}")

        try:
            response = self._transport.send(request)
        except requests.exceptions.Timeout as e:
            raise Form3TransportError(f"Request to Form3 timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise Form3TransportError(f"Failed to connect to Form3 at {self._base_url}: {e}") from e

        try:
            body = response.content or b""
        except requests.exceptions.RequestException as e:
            raise Form3TransportError(f"Failed to read Form3 response: {e}") from e
        finally:
            response.close()

        status = response.status_code
        logger.debug(f"Response status: {status}")

        if status in (200, 201):
            return self._unmarshal(body, target)
        if status == 204:
            return None

        error = self._api_error(status, body)
        logger.debug(f"API Error: {error}")
        raise error

    def create_account(
        self,
        organisation_id: str,
        attributes: AccountAttributes | None,
    ) -> Account:
        """
        Create an account under the given organisation.

        Returns:
            The created account, including server-assigned fields (version)
        """
        headers = {"Accept": MEDIA_TYPE, "Content-Type": MEDIA_TYPE}
        payload = AccountEnvelope(
            data=Account(
                id=new_account_id(),
                organisation_id=organisation_id,
                type=ACCOUNT_TYPE,
                attributes=attributes,
            )
        )

        request = self.new_request("POST", ACCOUNTS_ENDPOINT, payload)
        envelope = self.execute(request, headers, target=AccountEnvelope)
        account = self._require_account(envelope)

        logger.info(f"Created Form3 {account}")
        return account

    def fetch_account(self, account_id: str) -> Account:
        """Fetch the account with the given identifier."""
        headers = {"Accept": MEDIA_TYPE}

        request = self.new_request("GET", f"{ACCOUNTS_ENDPOINT}/{account_id}")
        envelope = self.execute(request, headers, target=AccountEnvelope)
        return self._require_account(envelope)

    def delete_account(self, account_id: str, version: int) -> None:
        """
        Delete the account with the given identifier.

        Raises:
            Form3APIError: 404 if the account does not exist,
                409 if version is not the current one
        """
        headers = {"Accept": MEDIA_TYPE}

        request = self.new_request("DELETE", f"{ACCOUNTS_ENDPOINT}/{account_id}?version={version}")
        self.execute(request, headers)

        logger.info(f"Deleted Form3 account id={account_id} version={version}")

    def _require_account(self, envelope: AccountEnvelope | None) -> Account:
        """Unwrap an envelope, rejecting an empty success body."""
        if envelope is None:
            raise Form3DeserializationError("", ValueError("empty response body, expected account"))
        return envelope.data

    def _api_error(self, status_code: int, body: bytes) -> Form3APIError:
        """
        Decode an error body into Form3APIError.

        An empty body or a JSON null leaves error_code and error_message unset.

        Raises:
            Form3DeserializationError: If the body is not a valid error object
        """
        if not body:
            return Form3APIError(status_code)

        try:
            data = json.loads(body)
            if data is None:
                return Form3APIError(status_code)
            if not isinstance(data, dict):
                raise TypeError(f"expected JSON object, got {type(data).__name__}")
            error_code = data.get("error_code")
            error_message = data.get("error_message")
            if error_code is not None and (
                not isinstance(error_code, int) or isinstance(error_code, bool)
            ):
                raise TypeError(f"error_code must be an integer, got {error_code!r}")
            if error_message is not None and not isinstance(error_message, str):
                raise TypeError(f"error_message must be a string, got {error_message!r}")
        except (ValueError, TypeError) as e:
            raise Form3DeserializationError(body.decode("utf-8", errors="replace"), e) from e

        return Form3APIError(status_code, error_code, error_message)

    def _unmarshal(self, body: bytes, target: Any) -> Any:
        """
        Decode a JSON body, optionally into target via target.from_dict().

        An empty body or a JSON null decodes to None.
        """
        if not body:
            return None

        try:
            data = json.loads(body)
            if data is None or target is None:
                return data
            return target.from_dict(data)
        except (ValueError, TypeError, KeyError) as e:
            raise Form3DeserializationError(body.decode("utf-8", errors="replace"), e) from e

    def _marshal(self, payload: Any) -> bytes:
        """Encode payload as compact JSON."""
        data = payload.to_dict() if hasattr(payload, "to_dict") else payload
        try:
            return json.dumps(data, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise Form3SerializationError(f"json {payload!r}, error: {e}") from e
