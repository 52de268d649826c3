"""Async client for the LPSN website.

LPSN exposes no API for species lookups, so this client fetches two kinds of
HTML pages and scrapes them:

- ``{base_url}/search?word=...`` lists matching species as ``/species/<id>``
  links
- ``{base_url}/species/<id>`` holds the details of a single species
"""

import asyncio
import logging

import httpx

from lpsnapi.config.models import LPSNConfig
from lpsnapi.species.document import LPSNDocument
from lpsnapi.species.errors import NetworkError, UpstreamTimeoutError
from lpsnapi.species.extractors import build_species_record, extract_identifications
from lpsnapi.species.models import Identification, SpeciesRecord

logger = logging.getLogger(__name__)


class LPSNClient:
    """Search LPSN and scrape species detail pages."""

    def __init__(
        self,
        config: LPSNConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Application configuration; defaults are used when omitted
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or LPSNConfig()
        self.transport = transport

    def _create_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.http_timeout_seconds),
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
            follow_redirects=True,
            limits=httpx.Limits(max_connections=self.config.max_concurrency + 1),
            transport=self.transport,
        )

    async def _get_document(
        self, client: httpx.AsyncClient, path: str, params: dict[str, str] | None = None
    ) -> LPSNDocument:
        """Fetch a page and parse it.

        Raises:
            UpstreamTimeoutError: If the request timed out
            NetworkError: If the request failed or returned a non-success status
            ParseError: If the page could not be parsed
        """
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(f"Timed out fetching {path}", url=path) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"LPSN returned {e.response.status_code} for {path}", url=str(e.request.url)
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Error fetching {path}: {e}", url=path) from e

        return LPSNDocument.parse(response.text)

    async def _search(self, client: httpx.AsyncClient, word: str) -> list[Identification]:
        document = await self._get_document(client, "/search", params={"word": word})
        identifications = extract_identifications(document)
        logger.debug("Search for %r matched %d species", word, len(identifications))
        return identifications

    async def _fetch_species(
        self, client: httpx.AsyncClient, species_id: str, name: str
    ) -> SpeciesRecord:
        document = await self._get_document(client, f"/species/{species_id}")
        return build_species_record(document, species_id, name)

    async def search(self, word: str) -> list[Identification]:
        """Search LPSN for species matching ``word``.

        Args:
            word: Search term, sent URL-encoded

        Returns:
            Identifications in the order they appear on the results page
        """
        async with self._create_http_client() as client:
            return await self._search(client, word)

    async def fetch_species(self, species_id: str, name: str) -> SpeciesRecord:
        """Fetch and scrape the detail page of one species.

        Args:
            species_id: Identifier taken from the search result link
            name: Display name of the species, used to derive the author

        Returns:
            SpeciesRecord built from the detail page
        """
        async with self._create_http_client() as client:
            return await self._fetch_species(client, species_id, name)

    async def list_bacteria(self, word: str) -> list[SpeciesRecord]:
        """Search LPSN and fetch the record of every match.

        Detail pages are fetched concurrently, at most ``max_concurrency`` at
        a time. The result is all-or-nothing: the first failure cancels the
        pending fetches and is raised.

        Args:
            word: Search term

        Returns:
            Records in the same order as the search results
        """
        semaphore = asyncio.Semaphore(self.config.max_concurrency)

        async with self._create_http_client() as client:
            identifications = await self._search(client, word)

            async def fetch_bounded(identification: Identification) -> SpeciesRecord:
                async with semaphore:
                    return await self._fetch_species(
                        client, identification.id, identification.name
                    )

            tasks = [
                asyncio.create_task(fetch_bounded(identification))
                for identification in identifications
            ]
            try:
                records = await asyncio.gather(*tasks)
            except Exception:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        logger.info("Fetched %d species records for %r", len(records), word)
        return list(records)
