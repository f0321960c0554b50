"""Request model consumed by the snippet targets.

This module defines a small, read-only model of an HTTP request in the
shape used by Postman collections. Targets never look at the plain input
data directly; they receive a ``Request`` built by ``build_request()``.

Key classes:
- Request: method, URL, headers and optional body
- Url: structured URL (protocol, auth, host, port, path, query, hash)
- Body: tagged union over the body modes
- Header, QueryParam, FormParam: ordered key/value entries
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast
from urllib.parse import urlsplit

from .collection_types import BodyObject, FormParamObject, KeyValueObject, RequestObject, UrlObject

BODY_MODES = ("raw", "urlencoded", "formdata", "file")


@dataclass(frozen=True)
class Header:
    """A request header.

    Attributes:
        key: Header name as written by the user (not trimmed)
        value: Header value as written by the user (not trimmed)
        disabled: Disabled headers are kept in the model but never emitted
    """

    key: str | None
    value: str | None
    disabled: bool = False


@dataclass(frozen=True)
class QueryParam:
    key: str | None
    value: str | None
    disabled: bool = False


@dataclass(frozen=True)
class FormParam:
    """An entry of an ``urlencoded`` or ``formdata`` body.

    Attributes:
        key: Field name
        value: Field value for text entries
        src: Path of the file to upload for file entries
        type: Either "text" or "file"
        disabled: Disabled entries are skipped by the body compiler
    """

    key: str | None
    value: str | None = None
    src: str | None = None
    type: str = "text"
    disabled: bool = False


@dataclass(frozen=True)
class UrlAuth:
    user: str | None
    password: str | None = None


@dataclass(frozen=True)
class Url:
    """A structured URL.

    Attributes:
        protocol: Scheme without "://" (e.g., "https"), if known
        auth: Userinfo part, if any
        host: Host name segments (e.g., ("postman-echo", "com"))
        port: Port as written, if any
        path: Path segments without the separating slashes
        query: Ordered query parameters, disabled ones included
        hash: Fragment without the leading "#"
        raw: The raw URL text, if the input carried one
    """

    protocol: str | None = None
    auth: UrlAuth | None = None
    host: tuple[str, ...] = ()
    port: str | None = None
    path: tuple[str, ...] = ()
    query: tuple[QueryParam, ...] = ()
    hash: str | None = None
    raw: str | None = None


@dataclass(frozen=True)
class Body:
    """Request payload, discriminated by ``mode``.

    Only the field that matches ``mode`` is meaningful. A mode outside
    BODY_MODES, or ``None``, stands for an empty body.
    """

    mode: str | None
    raw: str | None = None
    urlencoded: tuple[FormParam, ...] = ()
    formdata: tuple[FormParam, ...] = ()
    file_src: str | None = None
    disabled: bool = False

    @property
    def effective_mode(self) -> str | None:
        """The mode the body compiler should branch on, or None for no body."""
        if self.disabled or self.mode not in BODY_MODES:
            return None
        return self.mode


@dataclass(frozen=True)
class Request:
    method: str
    url: Url
    headers: tuple[Header, ...] = ()
    body: Body | None = None

    @property
    def body_mode(self) -> str | None:
        if self.body is None:
            return None
        return self.body.effective_mode

    def has_header(self, name: str) -> bool:
        """Check for an enabled header, ignoring case and surrounding whitespace."""
        wanted = name.lower()
        for header in self.headers:
            if header.disabled or not isinstance(header.key, str):
                continue
            if header.key.strip().lower() == wanted:
                return True
        return False


def build_request(document: RequestObject | Mapping[str, object] | str) -> Request:
    """Build a ``Request`` from plain data.

    Args:
        document: A Postman-style request mapping, or a bare URL string

    Returns:
        A frozen Request. Malformed entries are normalized rather than rejected.
    """
    if isinstance(document, str):
        return Request(method="GET", url=build_url(document))
    data = cast(RequestObject, document)
    method = data.get("method")
    headers = data.get("header")
    if headers is None:
        headers = data.get("headers")
    body = data.get("body")
    return Request(
        method=method.upper() if isinstance(method, str) and method else "GET",
        url=build_url(data.get("url")),
        headers=tuple(_build_header(item) for item in _entries(headers)),
        body=build_body(body) if isinstance(body, Mapping) else None,
    )


def build_url(url: UrlObject | str | None) -> Url:
    """Build a ``Url`` from a URL string or a Postman URL object."""
    if isinstance(url, str):
        return _parse_url(url)
    if not isinstance(url, Mapping):
        return Url()
    host = url.get("host")
    path = url.get("path")
    port = url.get("port")
    auth = url.get("auth")
    return Url(
        protocol=_text(url.get("protocol")),
        auth=UrlAuth(user=_text(auth.get("user")), password=_text(auth.get("password")))
        if isinstance(auth, Mapping)
        else None,
        host=_segments(host, "."),
        port=str(port) if port not in (None, "") else None,
        path=_path_segments(path),
        query=tuple(_build_query_param(item) for item in _entries(url.get("query"))),
        hash=_text(url.get("hash")),
        raw=_text(url.get("raw")),
    )


def build_body(body: BodyObject | Mapping[str, object]) -> Body:
    data = cast(BodyObject, body)
    mode = data.get("mode")
    file_object = data.get("file")
    file_src = _text(file_object.get("src")) if isinstance(file_object, Mapping) else None
    return Body(
        mode=mode if isinstance(mode, str) else None,
        raw=_text(data.get("raw")),
        urlencoded=tuple(_build_form_param(item) for item in _entries(data.get("urlencoded"))),
        formdata=tuple(_build_form_param(item) for item in _entries(data.get("formdata"))),
        file_src=file_src,
        disabled=data.get("disabled") is True,
    )


def _parse_url(raw: str) -> Url:
    text = raw.strip()
    if not text:
        return Url(raw=raw)
    has_scheme = "://" in text
    try:
        parts = urlsplit(text if has_scheme else f"//{text}")
    except ValueError:
        return Url(raw=raw)
    netloc = parts.netloc
    auth: UrlAuth | None = None
    if "@" in netloc:
        userinfo, netloc = netloc.rsplit("@", 1)
        user, _, password = userinfo.partition(":")
        auth = UrlAuth(user=user, password=password or None)
    host, port = netloc, None
    if ":" in netloc and not netloc.endswith("]"):
        host, port = netloc.rsplit(":", 1)
    query: list[QueryParam] = []
    if parts.query:
        for chunk in parts.query.split("&"):
            key, sep, value = chunk.partition("=")
            query.append(QueryParam(key=key, value=value if sep else None))
    return Url(
        protocol=(parts.scheme or None) if has_scheme else None,
        auth=auth,
        host=tuple(host.split(".")) if host else (),
        port=port or None,
        path=_path_segments(parts.path),
        query=tuple(query),
        hash=parts.fragment or None,
        raw=raw,
    )


def _build_header(item: KeyValueObject) -> Header:
    return Header(
        key=_text(item.get("key")),
        value=_text(item.get("value")),
        disabled=item.get("disabled") is True,
    )


def _build_query_param(item: KeyValueObject) -> QueryParam:
    return QueryParam(
        key=_text(item.get("key")),
        value=_text(item.get("value")),
        disabled=item.get("disabled") is True,
    )


def _build_form_param(item: FormParamObject) -> FormParam:
    src = item.get("src")
    if isinstance(src, list):
        src = src[0] if src else None
    param_type = item.get("type")
    return FormParam(
        key=_text(item.get("key")),
        value=_text(item.get("value")),
        src=_text(src),
        type=param_type if isinstance(param_type, str) else "text",
        disabled=item.get("disabled") is True,
    )


def _entries(value: object) -> list[dict[str, object]]:
    """Keep the mapping entries of a list, dropping anything else."""
    if not isinstance(value, list):
        return []
    return [cast(dict[str, object], item) for item in value if isinstance(item, Mapping)]


def _path_segments(value: object) -> tuple[str, ...]:
    """Split a path, keeping empty segments so "/a/" and "/a//b" survive rendering."""
    if isinstance(value, str):
        if not value:
            return ()
        parts = value.split("/")
        return tuple(parts[1:] if value.startswith("/") else parts)
    return _segments(value, "/")


def _segments(value: object, separator: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(part for part in value.split(separator) if part)
    if isinstance(value, list):
        return tuple(text for text in (_text(part) for part in value) if text is not None)
    return ()


def _text(value: object) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value).lower() if isinstance(value, bool) else str(value)
    return None
