"""
HTTP client for the document-indexing service.

Every request goes through IndexServiceClient.call(), which normalizes the
outcome:

- 2xx: the body is JSON-decoded when the response declares
  ``application/json``, otherwise returned as text (None when empty).
- non-2xx: ApiError carrying status, reason phrase and the full body text;
  404 raises the NotFoundError subclass.
- no usable response (transport failure, undecodable content): NetworkError.

The client never retries.

Usage:
    async with IndexServiceClient("http://localhost:5278") as client:
        indexes = await client.list_indexes()
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from indexconsole.core.exceptions import (
    ApiError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
)
from indexconsole.core.logging import get_logger
from indexconsole.core.models import Index, IndexCreate, parse_index, parse_index_list

logger = get_logger(__name__)

INDEXES_PATH = "/indexes/"


def index_path(name: str) -> str:
    """Path of one index, with the name URL-encoded as a single segment."""
    return f"/indexes/{quote(name, safe='')}"


class IndexServiceClient:
    """
    Async client for the indexing service API.
    """

    def __init__(
        self,
        base_url: str,
        timeout_sec: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_sec),
            transport=transport,
        )

    async def __aenter__(self) -> "IndexServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def call(
        self,
        path: str,
        method: str = "GET",
        *,
        json_body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue one request and return the parsed body.

        Args:
            path: Path relative to the base URL
            method: HTTP method
            json_body: JSON-serializable request body
            params: Query string parameters
            data: Multipart form fields (used together with files)
            files: Multipart file fields

        Returns:
            Decoded JSON, response text, or None for an empty body

        Raises:
            NotFoundError: On 404
            ApiError: On any other non-2xx status
            NetworkError: When no usable response was received
            MalformedResponseError: When a JSON response cannot be decoded
        """
        logger.debug("Request", method=method, path=path)
        try:
            response = await self._http.request(
                method,
                path,
                json=json_body,
                params=params,
                data=data,
                files=files,
            )
        except httpx.RequestError as e:
            logger.warning("Transport failure", method=method, path=path, error=e)
            raise NetworkError(
                f"{method} {path} failed: {type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            raise self._map_http_error(response, method, path)

        return self._decode_body(response)

    def _map_http_error(
        self, response: httpx.Response, method: str, path: str
    ) -> ApiError:
        """Build the ApiError for a non-2xx response."""
        error_cls = NotFoundError if response.status_code == 404 else ApiError
        logger.warning(
            "Service returned an error",
            method=method,
            path=path,
            status=response.status_code,
        )
        return error_cls(
            response.status_code,
            response.reason_phrase,
            response.text,
            method=method,
            path=path,
        )

    def _decode_body(self, response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response.text
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Response declared application/json but could not be decoded: {e}"
            ) from e

    # === Endpoints ===

    async def list_indexes(self) -> List[Index]:
        """``GET /indexes/``"""
        return parse_index_list(await self.call(INDEXES_PATH))

    async def get_index(self, name: str) -> Index:
        """``GET /indexes/{name}``"""
        return parse_index(await self.call(index_path(name)))

    async def create_index(self, name: str, description: Optional[str] = None) -> Any:
        """``POST /indexes/``"""
        body = IndexCreate(name=name, description=description)
        return await self.call(INDEXES_PATH, "POST", json_body=body.model_dump())

    async def delete_index(self, name: str, force: bool = False) -> Any:
        """``DELETE /indexes/{name}?force=...``"""
        return await self.call(
            index_path(name),
            "DELETE",
            params={"force": "true" if force else "false"},
        )

    async def upload_document(
        self,
        index_name: str,
        file_path: Path,
        document_name: Optional[str] = None,
        document_type: Optional[str] = None,
    ) -> Any:
        """``POST /indexes/{name}/documents/`` as multipart form data.

        Optional fields are sent only when given; the service applies its
        own defaults for omitted ones.
        """
        content_type = (
            mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        )
        files = {"file": (file_path.name, file_path.read_bytes(), content_type)}

        data: Dict[str, str] = {}
        if document_name:
            data["document_name"] = document_name
        if document_type:
            data["document_type"] = document_type

        return await self.call(
            f"{index_path(index_name)}/documents/",
            "POST",
            data=data or None,
            files=files,
        )
