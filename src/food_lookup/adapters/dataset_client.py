"""Clients for reading food dataset resources."""

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import httpx


class DatasetClient(Protocol):
    """Interface for reading dataset resources by relative path."""

    async def fetch_text(self, path: str) -> str:
        """Return the resource body as text."""

    async def fetch_json(self, path: str) -> object:
        """Return the resource body decoded from JSON."""


@dataclass
class HttpxDatasetClient(DatasetClient):
    """HTTPX-backed dataset client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxDatasetClient":
        """Create a dataset client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_text(self, path: str) -> str:
        """Fetch a resource as text."""
        response = await self._get(path)
        return response.text

    async def fetch_json(self, path: str) -> object:
        """Fetch a resource and decode it as JSON."""
        response = await self._get(path)
        return response.json()

    async def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class LocalDatasetClient(DatasetClient):
    """Dataset client reading resources from a local directory."""

    root: Path

    async def fetch_text(self, path: str) -> str:
        """Read a resource file as UTF-8 text."""
        return await asyncio.to_thread(self._read, path)

    async def fetch_json(self, path: str) -> object:
        """Read a resource file and decode it as JSON."""
        return json.loads(await self.fetch_text(path))

    def _read(self, path: str) -> str:
        return (self.root / path).read_bytes().decode("utf-8")

    async def close(self) -> None:
        """Nothing to release for local files."""
        return None
