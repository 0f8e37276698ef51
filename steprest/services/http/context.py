"""Per-scenario holder of one HTTP exchange's request and response state."""

import logging
from pathlib import Path
from typing import Any, Mapping

import httpx

from steprest.config import Settings, get_settings
from steprest.exceptions import CookieNotFoundError, MethodNotSetError
from steprest.services.http.entity import (
    APPLICATION_JSON,
    APPLICATION_OCTET_STREAM,
    Entity,
    MediaType,
)
from steprest.services.http.http_client import HttpClient
from steprest.services.http.methods import HttpMethod
from steprest.services.http.multipart import FileBodyPart, MultiPart, resolve_file

logger = logging.getLogger(__name__)

CONTENT_TYPE = "content-type"


class HttpContext:
    """
    Request/response state shared by the HTTP step definitions of a scenario.

    Step definitions fill in the request piece by piece, call ``send()``, and
    then inspect ``status``, ``response_body`` and ``response_headers``.
    The context itself never talks to the network; the selected
    ``HttpMethod`` runs the request through an ``HttpClient``.

    Header names are case-sensitive as stored, except when resolving the
    request content type.
    """

    def __init__(
        self,
        client: HttpClient | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

        self.uri: str | None = None
        self.method: HttpMethod | None = None
        self.request_body: str | None = None
        self.attachments = MultiPart()
        self.cookies: dict[str, str] = {}
        self.request_headers: dict[str, list[Any]] = {}

        self.response_body: str | None = None
        self.status: int = 0
        self.response_headers: dict[str, list[str]] = {}

    @property
    def client(self) -> HttpClient:
        if self._client is None:
            self._client = HttpClient.from_settings(self.settings)
        return self._client

    @property
    def http_ssl_verify(self) -> bool:
        return self.settings.http_ssl_verify

    # Request side

    def add_query_parameter(self, name: str, value: Any):
        """Append a query parameter to the current URI, keeping path and existing params."""
        url = httpx.URL(self.uri)
        pair = str(httpx.QueryParams({name: value})).encode("ascii")
        query = url.query + b"&" + pair if url.query else pair
        self.uri = str(url.copy_with(query=query))

    def send(self):
        """Send the held request using the selected method."""
        if self.method is None:
            raise MethodNotSetError()
        logger.debug("Sending %s %s", self.method.value, self.uri)
        self.method.send(self, self.client)

    def get_request_body(self) -> Entity:
        """
        Resolve the outgoing payload.

        Returns:
            Multipart entity when at least one attachment was added, otherwise
            the raw text body with the resolved content type
        """
        if self.has_attachment():
            return Entity(self.attachments, self.attachments.media_type, is_multipart=True)
        return Entity(self.request_body, self.resolve_content_type())

    def resolve_content_type(self) -> MediaType:
        """Media type from the first content-type request header (any case), JSON if none."""
        for key, values in self.request_headers.items():
            if key.lower() == CONTENT_TYPE:
                return MediaType.parse(",".join(str(v) for v in values))
        return APPLICATION_JSON

    def request_header(self, key: str, value: Any):
        self.request_headers.setdefault(key, []).append(value)

    def add_global_headers(self, headers: Mapping[str, Any]):
        """Add default headers whose key was not set explicitly."""
        for key, value in headers.items():
            if key not in self.request_headers:
                self.request_header(key, value)

    def cookie(self, name: str, value: str):
        self.cookies[name] = value

    def add_cookies(self, cookies: Mapping[str, str]):
        self.cookies.update(cookies)

    def get_cookie_value(self, name: str) -> str:
        if name not in self.cookies:
            raise CookieNotFoundError(name)
        return self.cookies[name]

    def add_attachment(self, path: str | Path):
        """Attach a file as an octet-stream part named after the file."""
        file = resolve_file(path, self.settings.files_base_dir or None)
        self.attachments.body_part(FileBodyPart(file.name, file, APPLICATION_OCTET_STREAM))
        logger.debug("Attached %s", file)

    def has_attachment(self) -> bool:
        return len(self.attachments) > 0

    # Response side

    def response_header(self, key: str) -> list[str] | None:
        return self.response_headers.get(key)

    # Wait/poll support

    def retry(self):
        self.send()

    def result(self) -> str | None:
        return self.response_body

    def reset(self):
        """Clear every request and response field so the context can be reused."""
        self.uri = None
        self.method = None
        self.request_body = None
        self.request_headers.clear()
        self.attachments.cleanup()
        self.cookies.clear()
        self.response_body = None
        self.status = 0
        self.response_headers = {}
