"""File attachments and the multipart container they are collected in."""

import logging
from dataclasses import dataclass
from pathlib import Path

from steprest.services.http.entity import (
    APPLICATION_OCTET_STREAM,
    MULTIPART_FORM_DATA,
    MediaType,
)

logger = logging.getLogger(__name__)


def resolve_file(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """
    Resolve a file-system path to an existing file.

    Args:
        path: Absolute or relative path, ``~`` is expanded
        base_dir: Directory relative paths are resolved against (cwd if empty)

    Returns:
        Absolute path of the file

    Raises:
        FileNotFoundError: If no file exists at the resolved path
    """
    resolved = Path(path).expanduser()
    if not resolved.is_absolute() and base_dir:
        resolved = Path(base_dir).expanduser() / resolved
    resolved = resolved.resolve()

    if not resolved.is_file():
        raise FileNotFoundError(f"Attachment not found: {path}")
    return resolved


@dataclass
class FileBodyPart:
    """A named file part of a multipart payload."""
    name: str
    path: Path
    media_type: MediaType = APPLICATION_OCTET_STREAM

    @property
    def filename(self) -> str:
        return self.path.name


class MultiPart:
    """Ordered collection of body parts sent as a single multipart payload."""

    media_type = MULTIPART_FORM_DATA

    def __init__(self):
        self.body_parts: list[FileBodyPart] = []

    def body_part(self, part: FileBodyPart) -> "MultiPart":
        self.body_parts.append(part)
        return self

    def to_files(self) -> list[tuple[str, tuple[str, bytes, str]]]:
        """
        Build the ``files`` argument for an httpx request.

        File contents are read on every call so a resent request carries the
        whole file again.
        """
        return [
            (part.name, (part.filename, part.path.read_bytes(), str(part.media_type)))
            for part in self.body_parts
        ]

    def cleanup(self):
        """Drop all body parts. The container stays usable."""
        if self.body_parts:
            logger.debug("Discarding %d attachment(s)", len(self.body_parts))
        self.body_parts.clear()

    def __len__(self) -> int:
        return len(self.body_parts)

    def __bool__(self) -> bool:
        return bool(self.body_parts)
