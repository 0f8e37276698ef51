"""HTTP step context and the client it sends requests through."""

from steprest.services.http.context import HttpContext
from steprest.services.http.entity import Entity, MediaType
from steprest.services.http.http_client import HttpClient
from steprest.services.http.methods import HttpMethod
from steprest.services.http.multipart import FileBodyPart, MultiPart, resolve_file

__all__ = [
    "HttpContext",
    "HttpClient",
    "HttpMethod",
    "Entity",
    "MediaType",
    "MultiPart",
    "FileBodyPart",
    "resolve_file",
]
