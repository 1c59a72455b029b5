"""Upload values: raw files sent as multipart parts, or references by id/URL."""

from __future__ import annotations

import mimetypes
import os
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from telbot.exceptions import FileReadError

_DEFAULT_MIME = "application/octet-stream"


class InputFile(BaseModel):
    """A file to be uploaded as part of a multipart request.

    Either *data* (bytes held in memory) or *path* (a local file read when
    the request is sent) must be given.  The MIME type is guessed from the
    file name when omitted.

    Usage::

        InputFile(name="kiwi.jpg", data=raw_bytes, mime="image/jpeg")
        InputFile.from_path("photos/kiwi.jpg")
    """

    name: str
    data: Optional[bytes] = None
    path: Optional[str] = None
    mime: str = ""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _guess_mime(cls, values: object) -> object:
        if isinstance(values, dict) and not values.get("mime") and values.get("name"):
            guessed, _ = mimetypes.guess_type(values["name"])
            values = {**values, "mime": guessed or _DEFAULT_MIME}
        return values

    @model_validator(mode="after")
    def _check_source(self) -> "InputFile":
        if (self.data is None) == (self.path is None):
            raise ValueError("InputFile needs exactly one of 'data' or 'path'")
        return self

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike], name: Optional[str] = None, mime: str = "") -> "InputFile":
        """Build a path-backed upload; the file is only read at send time."""
        path = os.fspath(path)
        return cls(name=name or os.path.basename(path), path=path, mime=mime)

    def read(self) -> bytes:
        """Return the file content.

        Raises:
            FileReadError: If a path-backed file cannot be read.
        """
        if self.data is not None:
            return self.data
        assert self.path is not None  # guaranteed by _check_source
        try:
            with open(self.path, "rb") as fh:
                return fh.read()
        except OSError as exc:
            raise FileReadError(self.path, exc.strerror or str(exc)) from exc

    def __repr__(self) -> str:
        source = f"path={self.path!r}" if self.path is not None else f"{len(self.data or b'')} bytes"
        return f"InputFile(name={self.name!r}, mime={self.mime!r}, {source})"


# A file already known to Telegram (file_id or HTTP URL), or bytes to upload.
InputFileVariant = Union[InputFile, str]
