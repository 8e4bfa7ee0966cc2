"""Thin HTTP client wrapper used to download remote wordlists.

Centralizes the ``requests`` import, default headers, timeouts, and logging
so the wordlist loader doesn't carry this boilerplate.
"""

from __future__ import annotations

import importlib
from typing import Optional

from .exceptions import MissingDependencyError, WordlistError
from .logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "kurdish-didyoumean/0.1 (+wordlist loader)"

DEFAULT_TIMEOUT = 15


def _requests():
    """Lazily import ``requests`` so the offline core works without it."""
    try:
        return importlib.import_module("requests")
    except ImportError:
        return None


def require_requests():
    """Return the ``requests`` module or raise ``MissingDependencyError``."""
    mod = _requests()
    if not mod:
        raise MissingDependencyError("requests module not found. Install requests to load remote wordlists.")
    return mod


def get(url: str, *, timeout: Optional[float] = None):
    """Perform an HTTP GET with standard headers, logging, and error handling.

    Returns a ``requests.Response`` object.
    Raises ``WordlistError`` on connection failures.
    """
    requests = require_requests()
    headers = {"User-Agent": USER_AGENT, "Accept": "text/plain"}

    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    logger.debug("HTTP GET %s (timeout=%s)", url, effective_timeout)

    try:
        resp = requests.get(url, headers=headers, timeout=effective_timeout)
    except Exception as e:
        logger.error("HTTP request failed: %s: %s", url, e)
        raise WordlistError(f"Request failed: {e}") from e

    return resp


def get_text(url: str, *, timeout: Optional[float] = None) -> str:
    """GET *url* and return the decoded body.

    Raises ``WordlistError`` on HTTP 4xx/5xx.
    """
    resp = get(url, timeout=timeout)
    if resp.status_code >= 400:
        raise WordlistError(f"HTTP {resp.status_code} for {url}")
    if not resp.encoding:
        resp.encoding = "utf-8"
    return resp.text
