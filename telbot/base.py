"""Request base classes and the two capability markers.

Every Bot API request is an immutable pydantic model deriving from either
:class:`JsonMethod` (sent as a JSON document) or :class:`FileMethod` (sent
as ``multipart/form-data`` because some of its fields may carry uploads).
A request class declares the remote method it invokes and the Python type
its ``result`` decodes into::

    class GetMe(JsonMethod):
        api_method: ClassVar[str] = "getMe"
        result_type: ClassVar[Any] = User
"""

import functools
import json
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, TypeAdapter

from telbot.files import InputFile


@functools.lru_cache(maxsize=None)
def _result_adapter(result_type: Any) -> TypeAdapter:
    """Return a cached :class:`TypeAdapter` for *result_type*."""
    return TypeAdapter(result_type)


def _compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class TelegramMethod(BaseModel):
    """Base class for one Bot API call.

    Instances are frozen: a request value is built once, sent once and
    discarded.  It never references the transport that sends it.
    """

    api_method: ClassVar[str]
    result_type: ClassVar[Any]

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @classmethod
    def name(cls) -> str:
        """Bot API method name, the last segment of the request URL."""
        return cls.api_method

    def payload(self) -> Dict[str, Any]:
        """Return the request fields as JSON-compatible values, ``None`` dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> bytes:
        """Canonical JSON body: compact separators, UTF-8, no ``None`` fields."""
        return _compact_json(self.payload()).encode("utf-8")

    @classmethod
    def parse_result(cls, raw: Any) -> Any:
        """Validate the ``result`` member of a successful response.

        Raises:
            pydantic.ValidationError: If *raw* does not match :attr:`result_type`.
        """
        return _result_adapter(cls.result_type).validate_python(raw)


class JsonMethod(TelegramMethod):
    """A request serialized wholesale to a JSON document."""


class FileMethod(TelegramMethod):
    """A request that may carry file uploads and is sent as a multipart form."""

    def files(self) -> Dict[str, InputFile]:
        """Map wire field name → upload for every field holding raw file data.

        Fields holding a ``str`` (a file id or URL) are references, not
        uploads, and are left out.
        """
        found: Dict[str, InputFile] = {}
        for field_name, info in type(self).model_fields.items():
            value = getattr(self, field_name)
            if isinstance(value, InputFile):
                found[info.alias or field_name] = value
        return found

    def form_fields(self) -> Dict[str, str]:
        """Return every non-upload field as a string form value.

        Strings are sent verbatim; numbers, booleans, lists and objects are
        JSON-encoded, as the Bot API expects in multipart requests.
        """
        upload_fields = {
            field_name
            for field_name in type(self).model_fields
            if isinstance(getattr(self, field_name), InputFile)
        }
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=upload_fields)
        return {key: value if isinstance(value, str) else _compact_json(value) for key, value in data.items()}
