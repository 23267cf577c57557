"""Thin HTTP client wrapper used to fetch remote word lists.

Centralizes the ``requests`` import, default headers, timeouts, and logging so
that loaders don't duplicate this boilerplate.
"""

from __future__ import annotations

import importlib
from typing import Optional

from .exceptions import DictionaryLoadError, MissingDependencyError
from .logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "autocorrect-suggest/0.1"

DEFAULT_TIMEOUT = 15


def _requests():
    """Lazily import ``requests`` so offline use never pays for it."""
    try:
        return importlib.import_module("requests")
    except ImportError:
        return None


def require_requests():
    """Return the ``requests`` module or raise ``MissingDependencyError``."""
    mod = _requests()
    if not mod:
        raise MissingDependencyError("requests module not found. Install requests to load dictionaries from URLs.")
    return mod


def get(
    url: str,
    *,
    timeout: int | tuple | None = None,
    accept: Optional[str] = "text/plain",
    extra_headers: Optional[dict] = None,
):
    """Perform an HTTP GET with standard headers, logging, and error handling.

    Returns a ``requests.Response`` object.
    Raises ``DictionaryLoadError`` on connection failures.
    """
    requests = require_requests()
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    if extra_headers:
        headers.update(extra_headers)

    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    logger.debug("HTTP GET %s (timeout=%s)", url, effective_timeout)

    try:
        resp = requests.get(url, headers=headers, timeout=effective_timeout)
    except Exception as e:
        logger.error("HTTP request failed: %s (%s)", url, e)
        raise DictionaryLoadError(f"Request failed: {e}") from e

    return resp


def get_text(url: str, **kwargs) -> str:
    """GET *url* and return the decoded body.

    Keyword arguments are forwarded to :func:`get`.
    Raises ``DictionaryLoadError`` on HTTP 4xx/5xx.
    """
    resp = get(url, **kwargs)
    if resp.status_code >= 400:
        raise DictionaryLoadError(f"HTTP {resp.status_code} for {url}")
    if not getattr(resp, "encoding", None):
        resp.encoding = "utf-8"
    return resp.text
