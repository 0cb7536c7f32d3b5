"""HTTP access to an Iglu-style schema registry."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from iglu_schema_editor.configuration.runtime_settings import RegistrySettings
from iglu_schema_editor.schema_management.schema_models import Schema

from .registry_errors import RegistryAccessError, RegistryConnectionError, UnexpectedResponseError

logger = logging.getLogger(__name__)

LIST_ACCEPTED_STATUSES = frozenset({200})
PUT_ACCEPTED_STATUSES = frozenset({200, 201})
ENTITY_TYPE = "event"


def sort_schemas_by_name(schemas: Iterable[Schema]) -> list[Schema]:
    """Return schemas ordered by ascending ``self.name``; ties keep their order."""
    return sorted(schemas, key=lambda schema: schema.name)


class RegistryClient:
    """Synchronous registry client listing and writing schemas over HTTP."""

    def __init__(
        self,
        registry_url: str,
        *,
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._registry_url = registry_url
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    @classmethod
    def from_settings(
        cls, settings: RegistrySettings, *, transport: httpx.BaseTransport | None = None
    ) -> RegistryClient:
        return cls(settings.url, timeout_seconds=settings.timeout_seconds, transport=transport)

    @property
    def registry_url(self) -> str:
        return self._registry_url

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RegistryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_schemas(self, read_key: str | None = None) -> list[Schema]:
        """Fetch every schema in the registry, sorted by name.

        Raises:
          UnexpectedResponseError: If the registry does not answer 200.
          RegistryConnectionError: If the request fails without a response.
          RegistryAccessError: If the body is not a JSON array.
          SchemaError: If an entry is not a valid schema document.
        """
        response = self._send("GET", self._registry_url, api_key=read_key)
        _check_status(response, LIST_ACCEPTED_STATUSES)
        payload = _parse_json(response)
        if not isinstance(payload, list):
            raise RegistryAccessError("Registry list response must be a JSON array.")
        return sort_schemas_by_name(Schema.from_document(entry) for entry in payload)

    def put_schema(self, schema: Schema, write_key: str | None = None) -> Any:
        """Write ``schema`` under its name/format/version and return the acknowledgement.

        An empty acknowledgement body is returned as ``None``.
        """
        url = f"{self._registry_url.rstrip('/')}/{schema.identity.registry_path}"
        body = {"entity_type": ENTITY_TYPE, "schema_definition": schema.to_document()}
        response = self._send("PUT", url, api_key=write_key, body=body)
        _check_status(response, PUT_ACCEPTED_STATUSES)
        if not response.content.strip():
            return None
        return _parse_json(response)

    def _send(
        self, method: str, url: str, *, api_key: str | None, body: Any = None
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["apikey"] = api_key
        content = json.dumps(body) if body is not None else None
        try:
            response = self._client.request(method, url, headers=headers, content=content)
        except httpx.HTTPError as exc:
            raise RegistryConnectionError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response


def _check_status(response: httpx.Response, accepted: frozenset[int]) -> None:
    if response.status_code in accepted:
        return
    logger.warning(
        "Registry answered %s %s with status %s",
        response.request.method,
        response.request.url,
        response.status_code,
    )
    raise UnexpectedResponseError(response.status_code, response.text)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise RegistryAccessError(f"Registry returned invalid JSON: {exc}") from exc
