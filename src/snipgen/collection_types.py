from __future__ import annotations

from typing import TypedDict, Union

KeyValueObject = TypedDict(
    "KeyValueObject",
    {
        "key": str,
        "value": str,
        "disabled": bool,
        "description": str,
    },
    total=False,
)

FormParamObject = TypedDict(
    "FormParamObject",
    {
        "key": str,
        "value": str,
        "src": str,
        "type": str,
        "disabled": bool,
        "contentType": str,
    },
    total=False,
)

UrlAuthObject = TypedDict(
    "UrlAuthObject",
    {
        "user": str,
        "password": str,
    },
    total=False,
)

UrlObject = TypedDict(
    "UrlObject",
    {
        "raw": str,
        "protocol": str,
        "auth": UrlAuthObject,
        "host": Union[str, list[str]],
        "port": Union[str, int],
        "path": Union[str, list[str]],
        "query": list[KeyValueObject],
        "hash": str,
    },
    total=False,
)

FileObject = TypedDict(
    "FileObject",
    {
        "src": str,
    },
    total=False,
)

BodyObject = TypedDict(
    "BodyObject",
    {
        "mode": str,
        "raw": str,
        "urlencoded": list[KeyValueObject],
        "formdata": list[FormParamObject],
        "file": FileObject,
        "disabled": bool,
    },
    total=False,
)

RequestObject = TypedDict(
    "RequestObject",
    {
        "method": str,
        "url": Union[str, UrlObject],
        "header": list[KeyValueObject],
        "headers": list[KeyValueObject],
        "body": BodyObject,
        "description": str,
    },
    total=False,
)

ItemObject = TypedDict(
    "ItemObject",
    {
        "name": str,
        "request": Union[str, RequestObject],
        "item": list["ItemObject"],
    },
    total=False,
)

CollectionObject = TypedDict(
    "CollectionObject",
    {
        "info": dict[str, object],
        "item": list[ItemObject],
    },
    total=False,
)
