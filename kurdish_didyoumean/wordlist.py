"""Loading word lists from plain-text files or URLs.

Accepted format is one word per line. Blank lines and ``#`` comments are
skipped, and Hunspell ``.dic`` files work too: the leading entry-count line
is ignored and ``/FLAGS`` suffixes are cut off.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from . import http_client
from .exceptions import WordlistError
from .logger import get_logger

logger = get_logger(__name__)

_BOM = "\ufeff"


def parse_wordlist(text: str) -> List[str]:
    lines = text.lstrip(_BOM).splitlines()
    if lines and lines[0].strip().isdigit():
        lines = lines[1:]
    seen: set[str] = set()
    out: List[str] = []
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        word = entry.split("/", 1)[0].strip()
        if not word or word in seen:
            continue
        seen.add(word)
        out.append(word)
    return out


def load_wordlist_file(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read wordlist %s: %s", path, e)
        raise WordlistError(f"Cannot read wordlist {path}: {e}") from e
    words = parse_wordlist(text)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def fetch_wordlist(url: str, timeout: Optional[float] = None) -> List[str]:
    """Download a wordlist; *timeout* defaults to ``http_client.DEFAULT_TIMEOUT``."""
    words = parse_wordlist(http_client.get_text(url, timeout=timeout))
    logger.info("Downloaded %d words from %s", len(words), url)
    return words


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def load_wordlist(source: Union[str, Path]) -> List[str]:
    """Load from a URL or a local path, whichever *source* looks like."""
    if isinstance(source, str) and is_url(source):
        return fetch_wordlist(source)
    return load_wordlist_file(source)
