"""
Error types raised by the booklet imposer.

Every failure the CLI reports derives from BookletError so callers can
catch the whole family at the document boundary.
"""


class BookletError(Exception):
    """Base class for all booklet imposer errors."""


class UsageError(BookletError):
    """Invalid command-line usage, e.g. a batch output path that is not a directory."""


class LoadError(BookletError):
    """Source document is missing, unreadable or corrupt."""


class GeometryError(BookletError, ValueError):
    """Page count or page/sheet dimensions cannot produce a valid layout."""


class WriteError(BookletError):
    """Output document could not be written."""
