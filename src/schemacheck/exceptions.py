"""Exceptions raised by schemacheck.

Malformed JSON-LD never raises; it becomes a Finding. These exceptions cover
broken configuration and unusable CLI input.
"""


class SchemaCheckError(Exception):
    """Base class for schemacheck errors."""


class RuleTableError(SchemaCheckError):
    """The schema requirement table is missing or malformed."""


class InputFormatError(SchemaCheckError):
    """A CLI input file (document, batch or thresholds) cannot be used."""
