# pricehunt/scrapers/collector.py

"""Minimal HTML collector: visit a URL and fire callbacks per matched element.

This is the fetch/parse engine the scrapers sit on.  It knows nothing
about products; it only downloads a page through ``curl_cffi``, parses
it with BeautifulSoup and hands every element matching a registered CSS
selector to its callback.
"""

import fnmatch
import logging
import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag
from curl_cffi import requests as curl_requests
from curl_cffi.requests import BrowserTypeLiteral

from pricehunt.config.settings import Settings

logger = logging.getLogger("pricehunt.collector")


class FetchError(Exception):
    """The page could not be retrieved (transport error or non-2xx)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass
class LimitRule:
    """Rate-limit policy for hosts matching ``domain_glob``.

    Before each request a random delay in ``[0, random_delay)`` is slept
    and at most ``parallelism`` requests are in flight.
    """

    domain_glob: str
    random_delay: float = 0.0
    parallelism: int = 1
    _slots: threading.BoundedSemaphore = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        if self.parallelism < 1:
            raise ValueError("parallelism must be >= 1")
        self._slots = threading.BoundedSemaphore(self.parallelism)

    def matches(self, url: str) -> bool:
        """Return True if the URL's host falls under this rule."""
        host = urlparse(url).hostname or ""
        return fnmatch.fnmatchcase(host, self.domain_glob)

    def __enter__(self) -> "LimitRule":
        self._slots.acquire()
        if self.random_delay > 0:
            time.sleep(random.uniform(0, self.random_delay))
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._slots.release()


class HTMLElement:
    """One element matched by an ``on_html`` selector."""

    def __init__(self, tag: Tag, request_url: str = "") -> None:
        self.tag = tag
        self.request_url = request_url

    @property
    def text(self) -> str:
        """Trimmed text of the whole element."""
        return self.tag.get_text().strip()

    def child_text(self, selector: str) -> str:
        """Concatenated, trimmed text of every descendant matching *selector*."""
        return "".join(
            child.get_text() for child in self.tag.select(selector)
        ).strip()

    def child_attr(self, selector: str, attr: str) -> str:
        """Trimmed *attr* of the first descendant matching *selector*."""
        child = self.tag.select_one(selector)
        if child is None:
            return ""
        value = child.get(attr)
        if value is None:
            return ""
        if isinstance(value, list):
            value = " ".join(value)
        return str(value).strip()


ElementCallback = Callable[[HTMLElement], None]


class Collector:
    """Fetches pages and dispatches matched elements to callbacks."""

    def __init__(
        self,
        user_agent: str = Settings.USER_AGENT,
        timeout: int = Settings.REQUEST_TIMEOUT,
        impersonate: BrowserTypeLiteral = Settings.IMPERSONATE_BROWSER,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = curl_requests.Session(impersonate=impersonate)
        self._rules: list[LimitRule] = []
        self._callbacks: list[tuple[str, ElementCallback]] = []

    def limit(self, rule: LimitRule) -> None:
        """Register a rate-limit rule."""
        self._rules.append(rule)

    def on_html(self, selector: str, callback: ElementCallback) -> None:
        """Call *callback* once for every element matching *selector*."""
        self._callbacks.append((selector, callback))

    def _rule_for(self, url: str) -> LimitRule | None:
        for rule in self._rules:
            if rule.matches(url):
                return rule
        return None

    def _fetch(self, url: str) -> str:
        headers = {
            **Settings.DEFAULT_HEADERS,
            "User-Agent": self.user_agent,
        }
        try:
            resp = self.session.get(
                url, headers=headers, timeout=self.timeout,
            )
        except Exception as exc:
            raise FetchError(url, str(exc)) from exc
        if not 200 <= resp.status_code < 300:
            raise FetchError(url, f"HTTP {resp.status_code}")
        return str(resp.text)

    def visit(self, url: str) -> None:
        """Fetch *url* and run every matching callback.

        Raises:
            FetchError: On transport failure or a non-2xx response.
        """
        rule = self._rule_for(url)
        if rule is None:
            html = self._fetch(url)
        else:
            with rule:
                html = self._fetch(url)
        logger.debug("Fetched %s (%d bytes)", url, len(html))

        soup = BeautifulSoup(html, "lxml")
        for selector, callback in self._callbacks:
            for tag in soup.select(selector):
                callback(HTMLElement(tag, request_url=url))

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()
