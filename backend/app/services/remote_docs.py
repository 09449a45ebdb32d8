"""Fetch a docs.rs crate page and convert it to plain text."""
from __future__ import annotations
import logging
import textwrap
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from backend.app.services.exceptions import FetchError
from backend.app.services.relevance import Excerpt, MatchKind, truncate
from shared.config import Settings


def crate_docs_url(base_url: str, crate_name: str) -> str:
    return f"{base_url.rstrip('/')}/{crate_name}/latest/{crate_name}/index.html"


def html_to_text(html: str, wordwrap: int = 130) -> str:
    """Visible text of an HTML page: no scripts, styles, images or link targets."""
    soup = BeautifulSoup(html, "html.parser")
    for s in soup(["script", "style", "img", "noscript"]):
        s.decompose()
    text = soup.get_text("\n")
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    wrapped = []
    for line in lines:
        wrapped.extend(textwrap.wrap(line, width=wordwrap) or [line])
    return "\n".join(wrapped)


class RemoteDocsFetcher:
    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self._transport = transport

    async def fetch_html(self, url: str) -> str:
        self.logger.info(f"Making request to: {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                self.logger.info(f"Received response with status: {response.status_code}")
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Request failed with status code {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}", url=url) from e

    async def fetch_crate(self, crate_name: str) -> Excerpt:
        url = crate_docs_url(self.settings.docs_rs_base_url, crate_name)
        html = await self.fetch_html(url)
        text = html_to_text(html, wordwrap=self.settings.wordwrap)
        body, truncated = truncate(text, f"at {url}", self.settings.max_excerpt_length)
        return Excerpt(text=body, truncated=truncated, match=MatchKind.REMOTE)
