"""Option schemas and option validation.

Each target declares the options it understands as a sequence of
``OptionSpec``. User supplied options are never rejected: unknown keys are
dropped and invalid values fall back to the declared default.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

BOOLEAN = "boolean"
POSITIVE_INTEGER = "positiveInteger"
ENUM = "enum"


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of one configurable option.

    Attributes:
        id: Option key as used in option mappings (e.g., "indentCount")
        name: Human readable label
        type: One of "boolean", "positiveInteger" or "enum"
        default: Value used when the option is missing or invalid
        description: Help text for configuration UIs
        available_options: Allowed values, for enum options only
    """

    id: str
    name: str
    type: str
    default: object
    description: str
    available_options: tuple[object, ...] = ()

    def accepts(self, value: object) -> bool:
        if self.type == BOOLEAN:
            return isinstance(value, bool)
        if self.type == POSITIVE_INTEGER:
            return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0
        if self.type == ENUM:
            return value in self.available_options
        return True


INDENT_COUNT = OptionSpec(
    id="indentCount",
    name="Set indentation count",
    type=POSITIVE_INTEGER,
    default=2,
    description="Set the number of indentation characters to add per code level",
)
INDENT_TYPE = OptionSpec(
    id="indentType",
    name="Set indentation type",
    type=ENUM,
    default="Space",
    description="Select the character used to indent lines of code",
    available_options=("Tab", "Space"),
)
REQUEST_TIMEOUT = OptionSpec(
    id="requestTimeout",
    name="Set request timeout",
    type=POSITIVE_INTEGER,
    default=0,
    description="Set number of milliseconds the request should wait for a response"
    " before timing out (use 0 for infinity)",
)
FOLLOW_REDIRECT = OptionSpec(
    id="followRedirect",
    name="Follow redirects",
    type=BOOLEAN,
    default=True,
    description="Automatically follow HTTP redirects",
)
TRIM_REQUEST_BODY = OptionSpec(
    id="trimRequestBody",
    name="Trim request body fields",
    type=BOOLEAN,
    default=False,
    description="Remove white space and additional lines that may affect the server's response",
)

COMMON_OPTIONS: tuple[OptionSpec, ...] = (
    INDENT_COUNT,
    INDENT_TYPE,
    REQUEST_TIMEOUT,
    FOLLOW_REDIRECT,
    TRIM_REQUEST_BODY,
)


def sanitize_options(
    options: Mapping[str, object] | None,
    schema: Sequence[OptionSpec],
) -> dict[str, object]:
    """Resolve user options against a schema.

    Args:
        options: User supplied options. None, or anything that is not a mapping,
            is treated as an empty mapping
        schema: The option declarations of a target

    Returns:
        A dict holding exactly the schema's option ids, in schema order
    """
    supplied = options if isinstance(options, Mapping) else {}
    result: dict[str, object] = {}
    for spec in schema:
        if spec.id in supplied and spec.accepts(supplied[spec.id]):
            result[spec.id] = supplied[spec.id]
        else:
            result[spec.id] = spec.default
    return result


def describe_options(schema: Sequence[OptionSpec]) -> list[dict[str, object]]:
    """Describe a schema as plain data for configuration UIs."""
    described: list[dict[str, object]] = []
    for spec in schema:
        entry: dict[str, object] = {
            "name": spec.name,
            "id": spec.id,
            "type": spec.type,
            "default": spec.default,
            "description": spec.description,
        }
        if spec.type == ENUM:
            entry["availableOptions"] = list(spec.available_options)
        described.append(entry)
    return described


def indent_for(options: Mapping[str, object]) -> str:
    unit = "\t" if options.get("indentType") == "Tab" else " "
    count = options.get("indentCount", 0)
    return unit * int(count) if isinstance(count, (int, float)) else ""
