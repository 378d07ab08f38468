"""GraphQL-over-HTTP client for the remote library service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from tsundoc.config import GENERIC_FETCH_ERROR, GRAPHQL_PATH, REQUEST_TIMEOUT_SEC
from tsundoc.errors import NetworkFailureError, ServiceError

logger = logging.getLogger(__name__)


def graphql_endpoint(base_url: str) -> str:
    """Append the GraphQL path to *base_url* unless it is already present."""
    base = base_url.rstrip("/")
    if base.endswith(GRAPHQL_PATH):
        return base
    return base + GRAPHQL_PATH


class GraphQLClient:
    """Execute named operations against one endpoint.

    A client is cheap and immutable: it only remembers the endpoint and an
    optional bearer token.  Each ``execute`` call opens its own
    ``httpx.AsyncClient`` so concurrent requests never share connection
    state.
    """

    def __init__(
        self,
        endpoint: str,
        token: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = endpoint
        self._token = token
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def authenticated(self) -> bool:
        return self._token is not None

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token is not None:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def execute(
        self,
        operation_name: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Run *query* and return its ``data`` object.

        Raises:
            NetworkFailureError: the service could not be reached, timed out
                or answered with a non-2xx status and no GraphQL errors.
            ServiceError: the response carried an ``errors`` payload or was
                not a GraphQL response at all.
        """
        payload: Dict[str, Any] = {
            "operationName": operation_name,
            "query": query,
            "variables": variables or {},
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._endpoint, json=payload, headers=self._headers()
                )
        except httpx.TimeoutException as exc:
            raise NetworkFailureError(
                f"{operation_name} timed out after {self._timeout}s", GENERIC_FETCH_ERROR
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkFailureError(
                f"{operation_name} failed: {exc}", GENERIC_FETCH_ERROR
            ) from exc

        body = self._decode(operation_name, response)
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            message = _first_error_message(errors)
            raise ServiceError(
                f"{operation_name} returned errors: {message or errors!r}",
                message or GENERIC_FETCH_ERROR,
            )

        if not response.is_success:
            raise NetworkFailureError(
                f"{operation_name} failed: HTTP {response.status_code}", GENERIC_FETCH_ERROR
            )

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise ServiceError(f"{operation_name} returned no data", GENERIC_FETCH_ERROR)
        return data

    @staticmethod
    def _decode(operation_name: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            if not response.is_success:
                raise NetworkFailureError(
                    f"{operation_name} failed: HTTP {response.status_code}", GENERIC_FETCH_ERROR
                ) from exc
            raise ServiceError(
                f"{operation_name} returned a non-JSON body", GENERIC_FETCH_ERROR
            ) from exc


def _first_error_message(errors: Any) -> Optional[str]:
    if isinstance(errors, list):
        for entry in errors:
            if isinstance(entry, dict) and entry.get("message"):
                return str(entry["message"])
    return None


class GraphQLClientFactory:
    """Build anonymous or authenticated clients for a fixed endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = REQUEST_TIMEOUT_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = graphql_endpoint(endpoint)
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def anonymous(self) -> GraphQLClient:
        return GraphQLClient(self._endpoint, timeout=self._timeout, transport=self._transport)

    def authenticated(self, token: str) -> GraphQLClient:
        return GraphQLClient(
            self._endpoint, token=token, timeout=self._timeout, transport=self._transport
        )
