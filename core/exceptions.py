"""Seeder exception hierarchy.

All seeder-specific exceptions derive from :class:`SeedError`. Network and
database failures are not wrapped: ``requests`` and SQLAlchemy exceptions
reach the caller unmodified.
"""


class SeedError(Exception):
    """Base class for seeder exceptions."""


class ConfigError(SeedError):
    """Raised when static configuration is invalid or incomplete."""


class MalformedDocumentError(SeedError):
    """Raised when the spreadsheet has no sheets or no data region."""


class DateParseError(SeedError):
    """Raised when a row's day, month and year do not form a calendar date."""


__all__ = [
    "SeedError",
    "ConfigError",
    "MalformedDocumentError",
    "DateParseError",
]
