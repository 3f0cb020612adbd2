# src/vast_validator/errors.py
from typing import Optional


class VastValidatorError(Exception):
    """Base class for errors that abort a validation call before a result exists."""


class ConfigurationError(VastValidatorError):
    """The call itself is unusable: no input, or a catalog without a root spec."""


class EmptyDocumentError(ConfigurationError):
    def __init__(self, message: str = "validator: empty XML document"):
        super().__init__(message)


class CatalogError(ConfigurationError):
    pass


class MalformedDocumentError(VastValidatorError):
    """Raised for syntax errors, unexpected closing tags and truncated input."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class PreconditionError(VastValidatorError):
    """The document parsed, but cannot be interpreted as a VAST document."""


class InvalidRootError(PreconditionError):
    def __init__(self, expected: str = "VAST", found: Optional[str] = None):
        message = f"Root element must be {expected}"
        if found:
            message = f"{message} (found {found})"
        super().__init__(message)
        self.expected = expected
        self.found = found


class MissingVersionError(PreconditionError):
    def __init__(self, message: str = "Missing VAST version attribute"):
        super().__init__(message)


class InvalidProbeUrlError(ValueError):
    """Raised by URL normalisation; the asset probe turns it into a failed bucket."""
