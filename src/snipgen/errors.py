from __future__ import annotations


class SnipgenError(Exception):
    """Base class for errors raised by snipgen."""


class ConverterError(SnipgenError, TypeError):
    """Raised when a converter is called against its calling contract."""


class LoadError(SnipgenError):
    """Raised when a request description cannot be read or parsed."""


class UnknownTargetError(SnipgenError, KeyError):
    """Raised when no target matches the requested language and variant."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
