from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BodyFragment:
    """Output of body compilation.

    Attributes:
        code: Payload construction statements, empty when there is no body
        payload_symbol: Name of the payload symbol defined by ``code``, if any
        needs_multipart: The generated program needs multipart support
        needs_file_io: The generated program reads files from disk
        mode: The body mode that was compiled, None for no body
    """

    code: str = ""
    payload_symbol: str | None = None
    needs_multipart: bool = False
    needs_file_io: bool = False
    mode: str | None = None

    def __bool__(self) -> bool:
        return bool(self.code)


@dataclass(frozen=True)
class HeaderFragment:
    code: str = ""
    count: int = 0

    def __bool__(self) -> bool:
        return self.count > 0


@dataclass
class SnippetOutput:
    """Output of snippet generation."""

    code: str
