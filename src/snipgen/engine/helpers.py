from __future__ import annotations


def indent_lines(code: str, prefix: str) -> str:
    """Prefix every non-empty line of ``code``.

    Example:
        >>> indent_lines("a\\n\\nb", "  ")
        '  a\\n\\n  b'
    """
    return "\n".join(f"{prefix}{line}" if line else line for line in code.split("\n"))


def file_name(path: str) -> str:
    """Last component of a POSIX or Windows style path."""
    return path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def seconds(milliseconds: object) -> str:
    """Format a millisecond count as a seconds literal (3000 -> "3", 1500 -> "1.5")."""
    if not isinstance(milliseconds, (int, float)):
        return "0"
    value = milliseconds / 1000
    return str(int(value)) if value == int(value) else str(value)


def timeout_ms(options: dict[str, object]) -> int:
    """The request timeout in whole milliseconds, 0 when disabled."""
    value = options.get("requestTimeout", 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)
