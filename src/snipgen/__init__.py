from .engine import BodyFragment, HeaderFragment, SnippetOutput, Target, TargetGrammar, compile_body, compile_headers
from .errors import ConverterError, LoadError, SnipgenError, UnknownTargetError
from .loader import NamedRequest, load_collection, load_request
from .options import COMMON_OPTIONS, OptionSpec, describe_options, sanitize_options
from .request import Body, FormParam, Header, QueryParam, Request, Url, UrlAuth, build_request
from .sanitize import sanitize
from .targets import get_target, list_targets
from .urls import url_string

__all__ = [
    "SnipgenError",
    "ConverterError",
    "LoadError",
    "UnknownTargetError",
    "BodyFragment",
    "HeaderFragment",
    "SnippetOutput",
    "Target",
    "TargetGrammar",
    "compile_body",
    "compile_headers",
    "NamedRequest",
    "load_collection",
    "load_request",
    "COMMON_OPTIONS",
    "OptionSpec",
    "describe_options",
    "sanitize_options",
    "Body",
    "FormParam",
    "Header",
    "QueryParam",
    "Request",
    "Url",
    "UrlAuth",
    "build_request",
    "sanitize",
    "get_target",
    "list_targets",
    "url_string",
]
