"""
"No original error" sentinel.

Errors created without an originating exception store ``NO_ORIGINAL_ERROR`` in
its place, so metadata, logging and rendering always have an error object to
work with. Compare with ``is``, never by message.
"""
from __future__ import annotations

from ...config.defaults import NO_ORIGINAL_ERROR_TEXT


class NoOriginalError(Exception):
    """Marker type for the sentinel; never raised by gerrors."""


NO_ORIGINAL_ERROR = NoOriginalError(NO_ORIGINAL_ERROR_TEXT)


def is_no_original_error(err: object) -> bool:
    return err is NO_ORIGINAL_ERROR


__all__ = ["NoOriginalError", "NO_ORIGINAL_ERROR", "is_no_original_error"]
