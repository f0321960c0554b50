from __future__ import annotations

import re
from urllib.parse import quote

from .request import QueryParam, Url

# Unresolved {{variables}} and existing percent escapes are passed through untouched.
_PRESERVED = re.compile(r"(\{\{[^{}]*\}\}|%[0-9A-Fa-f]{2})")

_PATH_SAFE = "!$&'()*+,;=:@~"
_QUERY_SAFE = "!$()*,/:;?@~"


def url_string(url: Url | None) -> str:
    """Render a URL object as a fully-qualified URL string.

    Disabled query parameters are dropped and query text is percent-encoded,
    except for unresolved ``{{variable}}`` references. Auth information is only
    rendered when a user is present.

    Example:
        >>> from snipgen.request import build_url
        >>> from snipgen.urls import url_string
        >>> url_string(build_url("https://postman-echo.com/get?key='a b c'"))
        'https://postman-echo.com/get?key=%27a%20b%20c%27'
    """
    if url is None or not url.host:
        return ""
    parts: list[str] = []
    if url.protocol:
        parts.append(f"{url.protocol.rstrip(':/')}://")
    if url.auth is not None and url.auth.user:
        parts.append(url.auth.user)
        if url.auth.password:
            parts.append(f":{url.auth.password}")
        parts.append("@")
    parts.append(host_string(url))
    if url.port:
        parts.append(f":{url.port}")
    parts.append(path_string(url, default=""))
    parts.append(query_string(url.query))
    if url.hash:
        parts.append(f"#{url.hash}")
    return "".join(parts)


def host_string(url: Url) -> str:
    return ".".join(url.host)


def path_string(url: Url, default: str = "/") -> str:
    if not url.path:
        return default
    return "/" + "/".join(encode_component(segment, _PATH_SAFE) for segment in url.path)


def query_string(query: tuple[QueryParam, ...]) -> str:
    """Render enabled query parameters, including the leading "?"."""
    pairs: list[str] = []
    for param in query:
        if param.disabled:
            continue
        key = encode_component(param.key or "", _QUERY_SAFE)
        if param.value is None:
            pairs.append(key)
        else:
            pairs.append(f"{key}={encode_component(param.value, _QUERY_SAFE)}")
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def request_path(url: Url) -> str:
    """Path and query as sent on the request line."""
    return path_string(url) + query_string(url.query)


def encode_component(text: str, safe: str) -> str:
    chunks = _PRESERVED.split(text)
    return "".join(chunk if index % 2 else quote(chunk, safe=safe) for index, chunk in enumerate(chunks))
