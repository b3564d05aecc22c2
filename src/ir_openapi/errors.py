"""ir-openapi exception hierarchy.

Everything the package raises on purpose derives from IrToOpenApiError, so
callers (and the CLI) can handle the whole family in one place.
"""

from pathlib import Path


class IrToOpenApiError(Exception):
    """Base exception for all ir-openapi errors."""


class UnknownVariantError(IrToOpenApiError):
    """Raised when an IR value carries a tag outside the closed set we convert.

    This always means the IR producer and this converter disagree on the IR
    version; it is never a recoverable condition.
    """

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Encountered unknown {kind}: {value!r}")


class IrLoadError(IrToOpenApiError):
    """Raised when an IR file cannot be read, parsed or validated."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to load IR from {path}: {detail}")
