from __future__ import annotations

from abc import ABC, abstractmethod

from ..sanitize import HEADER, RAW


class TargetGrammar(ABC):
    """Statement templates of one target language.

    The body and header compilers own the branching: which entries are
    emitted, in which order, and how every value is escaped. A grammar only
    knows how to spell each statement. All templates receive values that
    were already escaped with the matching ``*_context``, and return code
    without base indentation; ``indent`` is one nesting level.

    Attributes:
        raw_context: Sanitizer context of a raw body literal
        form_context: Sanitizer context of multipart field names and values
        header_context: Sanitizer context of header names and values
        payload_name: Symbol holding the payload in the generated program
    """

    raw_context: str | None = RAW
    form_context: str | None = None
    header_context: str | None = HEADER
    payload_name: str = "payload"

    def payload_symbol(self, mode: str) -> str:
        return self.payload_name

    @abstractmethod
    def raw_body(self, literal: str, indent: str) -> str:
        ...

    @abstractmethod
    def urlencoded_body(self, encoded: str, indent: str) -> str:
        ...

    @abstractmethod
    def form_open(self, indent: str) -> str:
        ...

    @abstractmethod
    def form_text(self, key: str, value: str, indent: str) -> str:
        ...

    @abstractmethod
    def form_file(self, key: str, src: str, filename: str, index: int, indent: str) -> str:
        """Open ``src``, attach it under ``key`` and report I/O errors at runtime.

        ``index`` counts file fields from 1 so templates can keep symbols unique.
        """

    @abstractmethod
    def form_close(self, indent: str) -> str:
        ...

    @abstractmethod
    def file_body(self, placeholder: str, indent: str) -> str:
        ...

    @abstractmethod
    def header_line(self, key: str, value: str, indent: str) -> str:
        ...

    def header_block(self, lines: list[str], indent: str) -> str:
        return "\n".join(lines)
