"""Spreadsheet web app backend.

The endpoint is a spreadsheet script published as a web app. It answers
``GET ?action=list`` with ``{"items": [...]}`` and accepts ``save`` and
``delete`` actions as a POSTed JSON body. Bodies are sent as ``text/plain``
because script web apps reject the CORS preflight a JSON content type
triggers in browsers, and the server side parses either the same way.
"""

import json
from typing import Any

import httpx
import structlog

from investigator.models import CharacterRecord

from .base import CharacterStore, TransportError, parse_character

logger = structlog.get_logger(__name__)

PLAIN_TEXT_HEADERS = {"Content-Type": "text/plain;charset=utf-8"}


class SpreadsheetStore(CharacterStore):
    """Character store backed by a spreadsheet web app."""

    def __init__(
        self,
        url: str | None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            url: Web app endpoint; may be unset, in which case every call fails
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request to the endpoint and decode its JSON reply."""
        if not self.url:
            logger.error("spreadsheet_url_missing")
            raise TransportError("Spreadsheet endpoint URL is not configured")

        content = json.dumps(payload) if payload is not None else None
        headers = PLAIN_TEXT_HEADERS if payload is not None else None

        try:
            # Script web apps answer through a redirect to the content host
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, self.url, params=params, content=content, headers=headers
                )
                response.raise_for_status()
                body = response.json()
        except httpx.TimeoutException as e:
            logger.error("spreadsheet_request_timeout", method=method, params=params)
            raise TransportError("Spreadsheet request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "spreadsheet_http_error",
                method=method,
                status_code=e.response.status_code,
            )
            raise TransportError(f"Spreadsheet returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("spreadsheet_request_failed", method=method, error=str(e))
            raise TransportError(f"Could not reach spreadsheet: {e}") from e
        except ValueError as e:
            logger.error("spreadsheet_response_not_json", method=method, error=str(e))
            raise TransportError("Spreadsheet response was not valid JSON") from e

        if isinstance(body, dict) and body.get("error"):
            logger.error("spreadsheet_reported_error", method=method, error=body["error"])
            raise TransportError(f"Spreadsheet reported an error: {body['error']}")

        return body

    async def list_characters(self) -> list[CharacterRecord]:
        body = await self._request("GET", params={"action": "list"})
        items = body.get("items") if isinstance(body, dict) else None
        if items is None:
            items = []
        if not isinstance(items, list):
            raise TransportError("Spreadsheet list response has no item array")

        records = [parse_character(item) for item in items]
        logger.info("characters_listed", count=len(records))
        return records

    async def save(self, record: CharacterRecord) -> None:
        await self._request("POST", payload={"action": "save", "data": record.to_document()})
        logger.info("character_saved", character_id=record.id, name=record.name)

    async def delete(self, character_id: str) -> None:
        await self._request("POST", payload={"action": "delete", "id": character_id})
        logger.info("character_deleted", character_id=character_id)
