"""Exception hierarchy for the speller's loading and configuration glue.

The ranking core never raises for well-typed input; these exceptions only
come out of wordlist loading, so callers can catch expected I/O problems
without accidentally swallowing programming mistakes.
"""

from __future__ import annotations


class DidYouMeanError(Exception):
    """Base exception for all package errors."""


class WordlistError(DidYouMeanError):
    """A wordlist file or URL could not be read."""


class MissingDependencyError(DidYouMeanError):
    """A required third-party module (requests) is not installed."""
