"""
Async client for the GitHub Contents API.

Resolves logical paths inside one repository branch to either a directory
listing or decoded UTF-8 text. Each call is a single request: no retries,
no caching, no rate limiting.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, TYPE_CHECKING

import httpx
import orjson

from ..errors import DecodeError, TransportError

if TYPE_CHECKING:
    from ..settings import AppSettings

DEFAULT_API_BASE = "https://api.github.com"

EntryType = Literal["file", "dir", "symlink", "submodule"]


@dataclass(frozen=True)
class ContentEntry:
    """One entry of a directory listing."""

    name: str
    type: EntryType
    path: str

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"


def decode_content(payload: Dict[str, Any]) -> str:
    """Decode the base64 `content` of a file entry into UTF-8 text.

    GitHub wraps the base64 body at 60 characters, so all whitespace is
    removed before decoding.

    Raises:
        DecodeError: If the content is not valid base64 or not valid UTF-8.
    """
    encoded = payload.get("content") or ""
    if not isinstance(encoded, str):
        raise DecodeError(f"File content must be a string, got {type(encoded).__name__}")

    compact = "".join(encoded.split())
    try:
        raw = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Content is not valid base64: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Content is not valid UTF-8: {e}") from e


class ContentFetcher:
    """Read-only access to one repository branch through the Contents API.

    Usable as an async context manager. An injected `client` is never closed
    by the fetcher; a client created internally is closed by `aclose()`.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        branch: str = "main",
        api_base: str = DEFAULT_API_BASE,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the fetcher.

        Args:
            owner: Repository owner (user or organization).
            repo: Repository name.
            branch: Branch, tag or commit to read from.
            api_base: API root, without trailing slash.
            client: Optional preconfigured httpx client (tests pass one with
                a mock transport).
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.api_base = api_base.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"Accept": "application/vnd.github+json"}
        )
        self.logger.debug(
            f"ContentFetcher for {owner}/{repo}@{branch} via {self.api_base}"
        )

    @classmethod
    def from_settings(
        cls, settings: "AppSettings", client: Optional[httpx.AsyncClient] = None
    ) -> "ContentFetcher":
        """Build a fetcher from the configured content source."""
        source = settings.source
        return cls(
            owner=source.owner,
            repo=source.repo,
            branch=source.branch,
            api_base=source.api_base,
            client=client,
        )

    def contents_url(self, path: str) -> str:
        """Return the Contents API URL for `path` (without the ref query)."""
        path = path.strip("/")
        return f"{self.api_base}/repos/{self.owner}/{self.repo}/contents/{path}"

    async def _get_json(self, path: str) -> Any:
        url = self.contents_url(path)
        self.logger.debug(f"GET {url}?ref={self.branch}")

        try:
            response = await self._client.get(url, params={"ref": self.branch})
        except httpx.HTTPError as e:
            self.logger.debug(f"Request to {url} failed: {e}")
            raise TransportError(None, url, f"Request failed: {url} ({e})") from e

        if not response.is_success:
            raise TransportError(response.status_code, url)

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    async def list_directory(self, path: str) -> List[ContentEntry]:
        """List the entries of a directory.

        Raises:
            TransportError: If the request does not succeed.
            DecodeError: If the response is not a directory listing.
        """
        payload = await self._get_json(path)
        if not isinstance(payload, list):
            raise DecodeError(f"'{path}' is not a directory listing")

        entries: List[ContentEntry] = []
        for item in payload:
            if not isinstance(item, dict) or "name" not in item:
                self.logger.debug(f"Skipping malformed listing item in '{path}': {item!r}")
                continue
            name = str(item["name"])
            entries.append(
                ContentEntry(
                    name=name,
                    type=item.get("type", "file"),
                    path=str(item.get("path") or f"{path.strip('/')}/{name}"),
                )
            )
        return entries

    async def read_text(self, path: str) -> str:
        """Fetch a file and return its content decoded as UTF-8 text.

        Raises:
            TransportError: If the request does not succeed.
            DecodeError: If the response is not a file entry or cannot be decoded.
        """
        payload = await self._get_json(path)
        if not isinstance(payload, dict):
            raise DecodeError(f"'{path}' is not a file")
        return decode_content(payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ContentFetcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
