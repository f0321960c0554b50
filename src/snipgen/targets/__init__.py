from __future__ import annotations

from ..engine import Target
from ..errors import UnknownTargetError
from .golang import GoNativeTarget
from .js_fetch import JsFetchTarget
from .js_jquery import JsJqueryTarget
from .libcurl import LibcurlTarget
from .nodejs_native import NodejsNativeTarget
from .php_curl import PhpCurlTarget
from .python_http_client import PythonHttpClientTarget
from .swift_urlsession import SwiftUrlSessionTarget

__all__ = [
    "GoNativeTarget",
    "JsFetchTarget",
    "JsJqueryTarget",
    "LibcurlTarget",
    "NodejsNativeTarget",
    "PhpCurlTarget",
    "PythonHttpClientTarget",
    "SwiftUrlSessionTarget",
    "get_target",
    "list_targets",
]

_TARGETS: tuple[Target, ...] = (
    LibcurlTarget(),
    GoNativeTarget(),
    JsFetchTarget(),
    JsJqueryTarget(),
    NodejsNativeTarget(),
    PhpCurlTarget(),
    PythonHttpClientTarget(),
    SwiftUrlSessionTarget(),
)


def list_targets() -> list[Target]:
    return list(_TARGETS)


def get_target(name: str, variant: str | None = None) -> Target:
    """Look up a target by id, or by language and variant.

    Example:
        >>> get_target("go-native").label
        'Go'
        >>> get_target("python", "http.client").id
        'python-http.client'
    """
    wanted = name.lower()
    for target in _TARGETS:
        if variant is None and target.id == wanted:
            return target
        if variant is not None and target.language == wanted and target.variant == variant.lower():
            return target
    if variant is None:
        raise UnknownTargetError(f"Unknown target: {name}")
    raise UnknownTargetError(f"Unknown target: {name} ({variant})")
