"""Blocking HTTP client wrapper that executes a context's request and captures the response."""

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from steprest.config import Settings
from steprest.services.http.entity import Entity

if TYPE_CHECKING:
    from steprest.services.http.context import HttpContext

logger = logging.getLogger(__name__)

CONTENT_TYPE = "content-type"


class HttpClient:
    """HTTP client used by the method senders to run a context's request."""

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        verify_ssl: bool = False,
        default_headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.default_headers = dict(default_headers or {})
        self._transport = transport
        self._client: httpx.Client | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "HttpClient":
        return cls(
            timeout=settings.http_timeout,
            follow_redirects=settings.http_follow_redirects,
            verify_ssl=settings.http_ssl_verify,
            default_headers=settings.http_headers,
            **kwargs,
        )

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=self.follow_redirects,
                verify=self.verify_ssl,
                transport=self._transport,
            )
        return self._client

    def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def execute(
        self,
        method: str,
        context: "HttpContext",
        entity: Entity | None = None,
    ) -> None:
        """
        Send the request held by a context and store the response back on it.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE, etc.)
            context: Context holding URI, headers and cookies; receives the response
            entity: Request payload, None for verbs without a body

        Raises:
            httpx.HTTPError: Transport failures, unchanged from httpx
        """
        if self.default_headers:
            context.add_global_headers(self.default_headers)

        request = self._build_request(method, context, entity)
        logger.info("%s %s", request.method, request.url)

        start_time = time.perf_counter()
        try:
            response = self._get_client().send(request)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", request.method, request.url, e)
            raise
        elapsed_ms = int((time.perf_counter() - start_time) * 1000)

        body_bytes = response.content
        try:
            body_text = body_bytes.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError):
            body_text = body_bytes.decode("latin-1")

        headers = self._collect_headers(response)
        # Cookies live on the context, not in the pooled client's jar
        self._get_client().cookies.clear()

        context.status = response.status_code
        context.response_body = body_text
        context.response_headers = headers
        if response.cookies:
            context.add_cookies({name: value for name, value in response.cookies.items()})

        logger.debug(
            "%s %s -> %d (%d ms, %d bytes)",
            request.method, request.url, response.status_code, elapsed_ms, len(body_bytes),
        )

    def _build_request(
        self,
        method: str,
        context: "HttpContext",
        entity: Entity | None,
    ) -> httpx.Request:
        """Translate the context's request side into an httpx request."""
        client = self._get_client()

        headers = [
            (key, str(value))
            for key, values in context.request_headers.items()
            for value in values
        ]

        kwargs: dict[str, Any] = {
            "method": method.upper(),
            "url": context.uri,
            "cookies": dict(context.cookies),
        }

        if entity is not None:
            if entity.is_multipart:
                # httpx writes its own content type carrying the boundary
                headers = [(k, v) for k, v in headers if k.lower() != CONTENT_TYPE]
                kwargs["files"] = entity.content.to_files()
            else:
                if not any(k.lower() == CONTENT_TYPE for k, _ in headers):
                    headers.append(("Content-Type", str(entity.media_type)))
                if entity.content is not None:
                    kwargs["content"] = str(entity.content).encode()

        kwargs["headers"] = headers
        return client.build_request(**kwargs)

    @staticmethod
    def _collect_headers(response: httpx.Response) -> dict[str, list[str]]:
        """Convert response headers to a multimap, keeping name case and repeats."""
        encoding = response.headers.encoding
        headers: dict[str, list[str]] = {}
        for raw_key, raw_value in response.headers.raw:
            headers.setdefault(raw_key.decode(encoding), []).append(raw_value.decode(encoding))
        return headers
