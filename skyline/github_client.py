"""Fetching users and contribution calendars from the GitHub GraphQL API."""

from __future__ import annotations

import json
import os
import urllib.error
import urllib.request
from datetime import datetime
from typing import Any, Protocol

from skyline.errors import ErrorType, SkylineError
from skyline.types import ContributionsResponse

GITHUB_LAUNCH_YEAR = 2008
DEFAULT_HOST = "github.com"

_VIEWER_QUERY = """
    query {
        viewer {
            login
        }
    }"""

_CONTRIBUTIONS_QUERY = """
    query ContributionGraph($username: String!, $from: DateTime!, $to: DateTime!) {
        user(login: $username) {
            login
            contributionsCollection(from: $from, to: $to) {
                contributionCalendar {
                    totalContributions
                    weeks {
                        contributionDays {
                            contributionCount
                            date
                        }
                    }
                }
            }
        }
    }"""

_JOIN_DATE_QUERY = """
    query UserJoinDate($username: String!) {
        user(login: $username) {
            createdAt
        }
    }"""


class _API(Protocol):
    def do(self, query: str, variables: dict[str, Any] | None) -> dict[str, Any]: ...


def default_host() -> str:
    """Return the GitHub host to talk to, from GH_HOST or the public default."""
    return os.environ.get("GH_HOST") or DEFAULT_HOST


def _find_token(host: str) -> str | None:
    if host == DEFAULT_HOST:
        names = ("GH_TOKEN", "GITHUB_TOKEN")
    else:
        names = ("GH_ENTERPRISE_TOKEN", "GITHUB_ENTERPRISE_TOKEN")
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


class GraphQLAPI:
    """A minimal GraphQL transport for a GitHub host."""

    def __init__(self, host: str, token: str, timeout: float = 30.0) -> None:
        self.host = host
        self.token = token
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        if self.host == DEFAULT_HOST:
            return "https://api.github.com/graphql"
        return f"https://{self.host}/api/graphql"

    def do(self, query: str, variables: dict[str, Any] | None) -> dict[str, Any]:
        """Run ``query`` and return the ``data`` object of the response."""
        body = json.dumps({"query": query, "variables": variables or {}}).encode()
        request = urllib.request.Request(
            self.endpoint,
            data=body,
            method="POST",
            headers={
                "Authorization": f"bearer {self.token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (urllib.error.URLError, OSError) as exc:
            raise SkylineError(ErrorType.NETWORK, "GraphQL request failed", exc) from exc
        except ValueError as exc:
            raise SkylineError(ErrorType.GRAPHQL, "invalid GraphQL response", exc) from exc

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) for e in errors)
            raise SkylineError(ErrorType.GRAPHQL, messages)
        return payload.get("data") or {}


class Client:
    """High-level queries for user and contribution data."""

    def __init__(self, api: _API) -> None:
        self.api = api

    def get_authenticated_user(self) -> str:
        """Return the login of the authenticated user."""
        try:
            data = self.api.do(_VIEWER_QUERY, None)
        except Exception as exc:
            raise SkylineError(
                ErrorType.NETWORK, "failed to fetch authenticated user", exc
            ) from exc
        login = ((data or {}).get("viewer") or {}).get("login") or ""
        if not login:
            raise SkylineError(
                ErrorType.VALIDATION, "received empty username from GitHub API"
            )
        return login

    def fetch_contributions(self, username: str, year: int) -> ContributionsResponse:
        """Return the contribution calendar of ``username`` for ``year``."""
        if not username:
            raise SkylineError(ErrorType.VALIDATION, "username cannot be empty")
        if year < GITHUB_LAUNCH_YEAR:
            raise SkylineError(
                ErrorType.VALIDATION, "year cannot be before GitHub's launch (2008)"
            )
        variables = {
            "username": username,
            "from": f"{year}-01-01T00:00:00Z",
            "to": f"{year}-12-31T23:59:59Z",
        }
        try:
            data = self.api.do(_CONTRIBUTIONS_QUERY, variables)
        except Exception as exc:
            raise SkylineError(
                ErrorType.NETWORK, "failed to fetch contributions", exc
            ) from exc
        response = ContributionsResponse.from_dict(data or {})
        if not response.login:
            raise SkylineError(
                ErrorType.VALIDATION, "received empty username from GitHub API"
            )
        return response

    def get_user_join_year(self, username: str) -> int:
        """Return the year ``username`` created their account."""
        if not username:
            raise SkylineError(ErrorType.VALIDATION, "username cannot be empty")
        try:
            data = self.api.do(_JOIN_DATE_QUERY, {"username": username})
        except Exception as exc:
            raise SkylineError(
                ErrorType.NETWORK, "failed to fetch user's join date", exc
            ) from exc
        created = ((data or {}).get("user") or {}).get("createdAt") or ""
        try:
            moment = datetime.fromisoformat(created.replace("Z", "+00:00"))
        except ValueError:
            raise SkylineError(
                ErrorType.VALIDATION, "invalid join date received from GitHub API"
            ) from None
        return moment.year


def initialize_github_client() -> Client:
    """Create a client for the default host using a token from the environment."""
    host = default_host()
    token = _find_token(host)
    if not token:
        raise SkylineError(
            ErrorType.NETWORK,
            "failed to create GraphQL client",
            ValueError(f"authentication token not found for host {host}"),
        )
    return Client(GraphQLAPI(host, token))