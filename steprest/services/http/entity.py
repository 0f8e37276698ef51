"""Outgoing request payloads and their media types."""

import re
from dataclasses import dataclass, field
from typing import Any


TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9!#$%&'*+.^_`|~-]+$")


@dataclass(frozen=True)
class MediaType:
    """Parsed media type such as ``application/json; charset=utf-8``."""
    type: str
    subtype: str
    parameters: dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """
        Parse a Content-Type style string.

        Args:
            value: String of the form ``type/subtype; key=value; ...``

        Returns:
            MediaType with lowercased type, subtype and parameter names

        Raises:
            ValueError: If the string is not a valid media type
        """
        if value is None:
            raise ValueError("Media type must not be None")

        head, *raw_params = value.split(";")
        head = head.strip()
        if head.count("/") != 1:
            raise ValueError(f"Invalid media type: {value!r}")

        type_, subtype = (part.strip() for part in head.split("/"))
        if not TOKEN_PATTERN.match(type_) or not TOKEN_PATTERN.match(subtype):
            raise ValueError(f"Invalid media type: {value!r}")

        parameters = {}
        for raw in raw_params:
            raw = raw.strip()
            if not raw:
                continue
            name, sep, param_value = raw.partition("=")
            name = name.strip()
            if not sep or not TOKEN_PATTERN.match(name):
                raise ValueError(f"Invalid media type parameter {raw!r} in {value!r}")
            param_value = param_value.strip()
            if len(param_value) >= 2 and param_value[0] == param_value[-1] == '"':
                param_value = param_value[1:-1]
            parameters[name.lower()] = param_value

        return cls(type_.lower(), subtype.lower(), parameters)

    @property
    def essence(self) -> str:
        """The ``type/subtype`` part without parameters."""
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        params = "".join(f"; {k}={v}" for k, v in self.parameters.items())
        return f"{self.essence}{params}"


APPLICATION_JSON = MediaType("application", "json")
APPLICATION_OCTET_STREAM = MediaType("application", "octet-stream")
MULTIPART_FORM_DATA = MediaType("multipart", "form-data")


@dataclass
class Entity:
    """Resolved outgoing payload: body content plus its media type."""
    content: Any
    media_type: MediaType
    # True only for attachment containers; a raw text body stays text
    # even under a multipart content type
    is_multipart: bool = False
