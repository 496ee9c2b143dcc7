"""GraphQL client for the GitHub project endpoints."""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.exceptions import ConnectionError, Timeout

from tap_github_projects.errors import QueryFailed
from tap_github_projects.models import ProjectRef
from tap_github_projects.queries import FIELDS_QUERY, ITEMS_QUERY

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 300


class GitHubProjectsClient:
    """Issues single GraphQL requests against a GitHub instance.

    Every call returns the raw response text. HTTP and network failures are
    raised as :class:`QueryFailed`; nothing is retried.
    """

    def __init__(
        self,
        token: str,
        api_url_base: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.token = token
        self.api_url_base = (api_url_base or DEFAULT_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_REQUEST_TIMEOUT
        self.user_agent = user_agent or "tap-github-projects"
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def url(self) -> str:
        return f"{self.api_url_base}/graphql"

    @property
    def http_headers(self) -> dict[str, str]:
        """Return the http headers needed."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"bearer {self.token}",
            "User-Agent": self.user_agent,
        }

    def execute(self, query: str, variables: dict[str, Any], ref: ProjectRef) -> str:
        """POST one GraphQL document and return the response body."""
        payload = {"query": query, "variables": variables}
        user_message = f"Something went wrong while trying to query {ref} :("
        self.logger.debug("POST %s with variables %s", self.url, variables)

        try:
            response = self.session.post(
                self.url,
                json=payload,
                headers=self.http_headers,
                timeout=self.timeout,
            )
        except Timeout as exc:
            msg = f"Request to {self.url} timed out after {self.timeout} seconds"
            raise QueryFailed(user_message, msg) from exc
        except ConnectionError as exc:
            raise QueryFailed(user_message, f"Connection error for {self.url}: {exc}") from exc
        except requests.RequestException as exc:
            raise QueryFailed(user_message, f"Request to {self.url} failed: {exc}") from exc

        self.validate_response(response, user_message)
        return response.text

    def validate_response(self, response: requests.Response, user_message: str) -> None:
        """Raise QueryFailed for any status outside 200-299."""
        if 200 <= response.status_code < 300:
            return
        if 400 <= response.status_code < 500:
            kind = "Client Error"
        elif 500 <= response.status_code < 600:
            kind = "Server Error"
        else:
            kind = "Unexpected Status"
        msg = (
            f"{response.status_code} {kind}: "
            f"{response.content!s} (Reason: {response.reason}) for url: {self.url}"
        )
        raise QueryFailed(user_message, msg)

    def request_items_page(self, ref: ProjectRef, cursor: str | None = None) -> str:
        """Fetch one page of project items.

        Without a cursor the ``cursor`` variable is left out of the request
        entirely, which asks for the first page.
        """
        variables: dict[str, Any] = {"org": ref.org, "projNum": ref.project_number}
        if cursor is not None:
            variables["cursor"] = cursor
        return self.execute(ITEMS_QUERY, variables, ref)

    def request_fields(self, ref: ProjectRef) -> str:
        """Fetch the project's field configuration."""
        variables = {"org": ref.org, "projNum": ref.project_number}
        return self.execute(FIELDS_QUERY, variables, ref)
