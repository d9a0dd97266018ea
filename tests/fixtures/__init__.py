"""
In-memory stand-in for the Form3 accounts API.

FakeAccountsAPI implements the client's Transport protocol, so the full
create → fetch → delete flow (including 404/409 answers) runs without a
network listener. Responses mirror what the Form3 fake account API returns.
"""

import json
from datetime import datetime, timezone
from urllib.parse import parse_qs, urlparse

import requests

ACCOUNTS_PATH = "/v1/organisation/accounts"
MEDIA_TYPE = "application/vnd.api+json"


def make_response(status: int, payload: dict | None = None, url: str = "") -> requests.Response:
    """Build a requests.Response with a JSON body (or no body)."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    if payload is not None:
        response.headers["Content-Type"] = MEDIA_TYPE
    return response


class FakeAccountsAPI:
    """Account store behind a Transport-compatible send()."""

    def __init__(self):
        self.accounts: dict[str, dict] = {}
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        self.requests.append(request)
        parsed = urlparse(request.url)
        path = parsed.path.rstrip("/")

        if path == ACCOUNTS_PATH and request.method == "POST":
            return self._create(request)
        if path.startswith(ACCOUNTS_PATH + "/"):
            account_id = path[len(ACCOUNTS_PATH) + 1 :]
            if request.method == "GET":
                return self._fetch(account_id, request.url)
            if request.method == "DELETE":
                version = parse_qs(parsed.query).get("version", [None])[0]
                return self._delete(account_id, version, request.url)

        return make_response(404, {"error_message": "Not Found"}, request.url)

    def _create(self, request: requests.PreparedRequest) -> requests.Response:
        data = json.loads(request.body or b"{}").get("data", {})

        if "attributes" not in data:
            return make_response(
                400,
                {
                    "error_message": "validation failure list:\nvalidation failure list:\n"
                    "attributes in body is required"
                },
                request.url,
            )
        if data["id"] in self.accounts:
            return make_response(
                409,
                {"error_message": "Account cannot be created as it violates a duplicate constraint"},
                request.url,
            )

        now = datetime.now(timezone.utc).isoformat()
        stored = dict(data, version=0, created_on=now, modified_on=now)
        self.accounts[data["id"]] = stored
        return make_response(201, self._envelope(stored), request.url)

    def _fetch(self, account_id: str, url: str) -> requests.Response:
        if account_id not in self.accounts:
            return make_response(404, {"error_message": f"record {account_id} does not exist"}, url)
        return make_response(200, self._envelope(self.accounts[account_id]), url)

    def _delete(self, account_id: str, version: str | None, url: str) -> requests.Response:
        if account_id not in self.accounts:
            return make_response(404, None, url)
        if version is None or int(version) != self.accounts[account_id]["version"]:
            return make_response(409, {"error_message": "invalid version"}, url)
        del self.accounts[account_id]
        return make_response(204, None, url)

    @staticmethod
    def _envelope(account: dict) -> dict:
        return {
            "data": account,
            "links": {"self": f"{ACCOUNTS_PATH}/{account['id']}"},
        }
