"""Loading files from disk and serving them from memory."""

from __future__ import annotations

import logging
from http import HTTPStatus
from pathlib import Path

from .handlers import Response

log = logging.getLogger(__name__)


def read_text_file(filename) -> str:
    """Return the whole content of *filename* as text.

    Raises :class:`OSError` when the file cannot be opened.
    """
    log.info("load file: %s", filename)
    return Path(filename).read_text(encoding="utf-8")


class StaticFile:
    """A file read once into memory and served with a fixed MIME type."""

    def __init__(self, path, mime_type: str):
        self.path = Path(path)
        self.mime_type = mime_type
        self.data = b""

    def load(self) -> int:
        """Read the file into memory and return its length.

        A missing or unreadable file leaves the content empty.
        """
        try:
            self.data = self.path.read_bytes()
        except OSError:
            self.data = b""
        log.info("load file: %s len: %d", self.path, len(self.data))
        return len(self.data)

    def respond(self) -> Response:
        """Return the loaded content, or a 404 when there is none."""
        if self.data:
            return Response(self.data, self.mime_type, HTTPStatus.OK)
        return Response(b"", self.mime_type, HTTPStatus.NOT_FOUND)