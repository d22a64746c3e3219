"""Rebrickable part id lookup.

Rebrickable cross-references part numbering schemes. Querying its parts
endpoint with a BrickLink id returns the matching parts, each carrying an
`external_ids` map that may include LDraw ids:

    {"results": [{"part_num": "3001", "external_ids": {"LDraw": ["3001"], ...}}]}
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ldraw_packer.exceptions import LookupServiceError

from .identifiers import header_normalized
from .identifiers import zero_padded

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rebrickable.com/api/v3"
DEFAULT_TIMEOUT = 10.0


def extract_ldraw_id(data: Any) -> str | None:
    """Pull the first LDraw id out of a parts search response.

    Any missing field, empty list or unexpected type means "no match".
    """
    try:
        ldraw_id = data["results"][0]["external_ids"]["LDraw"][0]
    except (KeyError, IndexError, TypeError):
        return None

    if not ldraw_id:
        return None
    return str(ldraw_id)


class RebrickableLookup:
    """IdentifierLookupProtocol implementation backed by the Rebrickable API.

    Use as an async context manager so the underlying HTTP client is closed:

        async with RebrickableLookup(api_key) as lookup:
            ldraw_id = await lookup.translate("3001bpb001")
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize lookup.

        Args:
            api_key: Rebrickable API key. Without one, every lookup is a miss.
            base_url: API root, without trailing slash.
            timeout: Request timeout in seconds (ignored when client is given).
            client: Shared httpx client. If None, one is created on first use
                    and closed by `aclose()`.
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._warned_no_key = False

    async def __aenter__(self) -> RebrickableLookup:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def translate(self, part_id: str) -> str | None:
        """Find the LDraw id for a BrickLink part id.

        Tries the id with its print header normalized, then with a zero
        inserted before the trailing number. The attempts run one after the
        other. A transport or protocol failure ends the lookup.

        Args:
            part_id: Part id without extension.

        Returns:
            LDraw id without extension, or None.
        """
        if not self.api_key:
            if not self._warned_no_key:
                logger.warning("No Rebrickable API key configured - skipping part id lookups")
                self._warned_no_key = True
            return None

        first = header_normalized(part_id)
        second = zero_padded(first)

        for query in (first, second):
            try:
                ldraw_id = await self._query(query)
            except LookupServiceError as e:
                logger.error(f"Lookup for part {part_id} failed: {e}")
                return None

            if ldraw_id:
                logger.info(f"Part {part_id} maps to LDraw {ldraw_id} (queried as {query})")
                return ldraw_id
            logger.debug(f"No LDraw id for {query}")

        logger.warning(f"Part {part_id} not supported by LDraw. File may not render correctly.")
        return None

    async def _query(self, bricklink_id: str) -> str | None:
        """Run one parts search.

        Raises:
            LookupServiceError: On transport errors, HTTP error statuses or
                a body that is not JSON.
        """
        url = f"{self.base_url}/lego/parts/"
        try:
            response = await self._get_client().get(
                url,
                params={"bricklink_id": bricklink_id},
                headers={"Authorization": f"key {self.api_key}"},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise LookupServiceError(f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise LookupServiceError(f"Invalid JSON from {url}: {e}") from e

        return extract_ldraw_id(data)
