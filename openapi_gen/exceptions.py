"""Errors raised by the generator pipeline.

Every stage raises a subclass of GeneratorError. Only the command line
catches them, prints the message and turns it into an exit status.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for all generator errors."""


class SchemaReadError(GeneratorError):
    """The input schema file could not be read."""


class SchemaDecodeError(GeneratorError):
    """The input is not valid JSON or does not have the expected shape."""


class TemplateError(GeneratorError):
    """The code template is missing or malformed."""


class OutputError(GeneratorError):
    """The destination file could not be created or written."""
