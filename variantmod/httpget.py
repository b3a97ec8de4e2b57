"""Fetching the body of a URL, with a fake for tests."""

from __future__ import annotations

import urllib.error
import urllib.request
from collections.abc import Mapping

__all__ = ["HttpGetter", "FakeGetter"]


class HttpGetter:
    """Fetches URLs over HTTP with a plain GET request."""

    def do_request(self, url: str) -> str:
        """Return the response body of ``url`` as text, whatever the status."""
        try:
            with urllib.request.urlopen(url) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            with exc:
                body = exc.read()
        return body.decode("utf-8", "replace")


class FakeGetter:
    """Answers requests from a fixed mapping of URL to body."""

    def __init__(self, expectations: Mapping[str, str]) -> None:
        self._expectations = dict(expectations)

    def do_request(self, url: str) -> str:
        """Return the body registered for ``url``; raise LookupError otherwise."""
        try:
            return self._expectations[url]
        except KeyError:
            raise LookupError(f"unexpected input: {url!r}") from None