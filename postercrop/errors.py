# postercrop/errors.py
# Failure taxonomy for the export path. Every error is terminal for the
# current batch invocation; nothing here is retried.

from __future__ import annotations


class ExportError(RuntimeError):
    """Base class for anything that stops an export."""


class SurfaceUnavailable(ExportError):
    """A drawing surface of the requested size could not be allocated."""


class EncodeFailure(ExportError):
    """The codec (or the PDF writer) produced no bytes."""


class DecodeFailure(ExportError):
    """The source bytes are not a readable image."""


class InvalidOptions(ExportError):
    """Rejected before any work starts, e.g. no output format selected."""
