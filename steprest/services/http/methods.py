"""HTTP verbs and the sender each one dispatches to."""

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from steprest.services.http.context import HttpContext
    from steprest.services.http.http_client import HttpClient


Sender = Callable[["HttpContext", "HttpClient"], None]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, name: str) -> "HttpMethod":
        """Look up a verb by name, ignoring case and surrounding whitespace."""
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {name}") from None

    @property
    def has_body(self) -> bool:
        return self in BODY_METHODS

    def send(self, context: "HttpContext", client: "HttpClient") -> None:
        """Perform this verb for the request held by ``context``."""
        SENDERS[self](context, client)


BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


def _send_without_body(method: HttpMethod) -> Sender:
    def sender(context: "HttpContext", client: "HttpClient") -> None:
        client.execute(method.value, context)
    return sender


def _send_with_body(method: HttpMethod) -> Sender:
    def sender(context: "HttpContext", client: "HttpClient") -> None:
        client.execute(method.value, context, entity=context.get_request_body())
    return sender


SENDERS: dict[HttpMethod, Sender] = {
    method: _send_with_body(method) if method in BODY_METHODS else _send_without_body(method)
    for method in HttpMethod
}
