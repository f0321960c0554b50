from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import cast
from urllib.parse import urlparse

from .collection_types import ItemObject, RequestObject
from .errors import LoadError
from .request import Request, build_request

RequestSource = str | PathLike[str] | Mapping[str, object]


@dataclass(frozen=True)
class NamedRequest:
    """A request of a collection together with its item name.

    Attributes:
        name: Item name, folder names joined with "/"
        request: The request built from the item
    """

    name: str
    request: Request


def load_request(source: RequestSource) -> Request:
    """Load a single request.

    Args:
        source: A file path, a URL, or a dict-like object. Collections are
            accepted too; their first request is returned

    Returns:
        The request built from the document

    Raises:
        LoadError: If the document cannot be read or holds no request
    """
    document = _read_source(source)
    if "item" in document:
        requests = _collect(cast(list[ItemObject], document.get("item")), prefix="")
        if not requests:
            raise LoadError("Collection does not contain any request")
        return requests[0].request
    if "request" in document:
        return _build_item_request(cast(ItemObject, document))
    return build_request(cast(RequestObject, document))


def load_collection(source: RequestSource) -> list[NamedRequest]:
    """Load every request of a Postman collection, folders flattened in document order."""
    document = _read_source(source)
    items = document.get("item")
    if not isinstance(items, list):
        raise LoadError("Collection must have an 'item' list")
    return _collect(cast(list[ItemObject], items), prefix="")


def _collect(items: object, prefix: str) -> list[NamedRequest]:
    if not isinstance(items, list):
        return []
    result: list[NamedRequest] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            continue
        raw_name = item.get("name")
        name = raw_name if isinstance(raw_name, str) and raw_name else f"request-{index + 1}"
        path = f"{prefix}/{name}" if prefix else name
        if "request" in item:
            result.append(NamedRequest(name=path, request=_build_item_request(cast(ItemObject, item))))
        result.extend(_collect(item.get("item"), prefix=path))
    return result


def _build_item_request(item: ItemObject) -> Request:
    request = item.get("request")
    if isinstance(request, str):
        return build_request(request)
    if isinstance(request, Mapping):
        return build_request(cast(RequestObject, request))
    raise LoadError(f"Item {item.get('name')!r} has no valid request")


def _is_url(source: str) -> bool:
    """Check if the source string is a URL."""
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _fetch_url(url: str) -> str:
    """Fetch content from a URL.

    Raises:
        LoadError: If the URL cannot be fetched
    """
    from urllib.request import Request as UrlRequest
    from urllib.request import urlopen

    try:
        request = UrlRequest(url, headers={"User-Agent": "snipgen"})
        with urlopen(request, timeout=30) as response:  # noqa: S310
            return response.read().decode("utf-8")
    except Exception as exc:
        raise LoadError(f"Failed to fetch URL: {url}") from exc


def _read_source(source: RequestSource) -> dict[str, object]:
    """Read a request or collection document from a path, URL or mapping."""
    if isinstance(source, Mapping):
        return dict(source)

    source_str = str(source) if isinstance(source, PathLike) else source
    if _is_url(source_str):
        text = _fetch_url(source_str)
        suffix = Path(urlparse(source_str).path).suffix.lower()
    else:
        path = Path(source_str)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LoadError(f"Cannot read {path}: {exc}") from exc
        suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        data = _load_yaml(text)
    else:
        data = _load_json_or_yaml(text)
    if not isinstance(data, dict):
        raise LoadError("Request document must be an object")
    return cast(dict[str, object], data)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    import yaml

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LoadError(f"Invalid YAML document: {exc}") from exc
