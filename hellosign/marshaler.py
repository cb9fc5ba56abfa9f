"""
Form marshaling for HelloSign option objects.

Option objects are pydantic models. Each field is written under its wire name
and nested values are addressed with brackets, the way the HelloSign API
expects them::

    signers[0][name]=Jack
    signers[0][email_address]=jack@example.com
    metadata[client]=acme
    file[0]=<file part "Document 0">

Per-field directives are declared with :func:`form_field`.
"""
import os
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"

FilePart = Tuple[str, Tuple[str, bytes, str]]


def form_field(default: Any = None, *, name: Optional[str] = None, omit_empty: bool = False,
               exclude: bool = False, **kwargs) -> Any:
    """Declare a model field together with its form directives.

    ``name`` overrides the wire name (the attribute name by default),
    ``omit_empty`` drops zero values ("", 0, False, empty list or map) and
    ``exclude`` keeps the field out of the form entirely.
    """
    extra: Dict[str, Any] = {"omit_empty": omit_empty}
    if name:
        extra["form_name"] = name
    if "default_factory" in kwargs:
        return Field(json_schema_extra=extra, exclude=exclude, **kwargs)
    return Field(default, json_schema_extra=extra, exclude=exclude, **kwargs)


class FormPayload:
    """Ordered form fields and file parts ready to hand over to requests."""

    def __init__(self):
        self.fields: List[Tuple[str, str]] = []
        self.files: List[FilePart] = []

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)

    def add_field(self, key: str, value: str):
        self.fields.append((key, value))

    def add_file(self, key: str, filename: str, content: bytes):
        self.files.append((key, (filename, content, DEFAULT_FILE_CONTENT_TYPE)))

    def as_request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``requests``: multipart when files are present, urlencoded otherwise."""
        if self.is_multipart:
            return {"data": self.fields, "files": self.files}
        return {"data": self.fields}

    def __repr__(self) -> str:
        return f"FormPayload(fields={self.fields!r}, files={[key for key, _ in self.files]!r})"


def marshal(obj: Optional[BaseModel]) -> FormPayload:
    """Marshal an option object into form fields and file parts."""
    payload = FormPayload()
    if obj is None:
        return payload
    if not isinstance(obj, BaseModel):
        raise TypeError(f"cannot marshal {type(obj).__name__}, expected a pydantic model")
    _marshal_model(payload, "", obj)
    return payload


def encode_query(obj: Optional[BaseModel]) -> List[Tuple[str, str]]:
    """Marshal an option object into query string pairs."""
    payload = marshal(obj)
    if payload.is_multipart:
        raise ValueError("file parts cannot be sent in a query string")
    return payload.fields


def _directives(info) -> Tuple[Optional[str], bool]:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    return extra.get("form_name"), bool(extra.get("omit_empty", False))


def _marshal_model(payload: FormPayload, prefix: str, obj: BaseModel):
    for attr, info in type(obj).model_fields.items():
        if info.exclude:
            continue
        form_name, omit_empty = _directives(info)
        value = getattr(obj, attr)
        if value is None:
            continue
        if omit_empty and _is_empty(value):
            continue
        name = form_name or attr
        key = f"{prefix}[{name}]" if prefix else name
        _marshal_value(payload, key, value)


def _marshal_value(payload: FormPayload, key: str, value: Any):
    if isinstance(value, BaseModel):
        _marshal_model(payload, key, value)
    elif _is_file(value):
        payload.add_file(key, _filename(value, key), _read(value))
    elif isinstance(value, dict):
        for item_key, item in value.items():
            if item is None:
                continue
            _marshal_value(payload, f"{key}[{item_key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            item_key = f"{key}[{index}]"
            if _is_file(item):
                payload.add_file(item_key, _filename(item, f"Document {index}"), _read(item))
            elif item is not None:
                _marshal_value(payload, item_key, item)
    else:
        payload.add_field(key, _format_primitive(value))


def _format_primitive(value: Any) -> str:
    # bool must be checked before int
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    return str(value)


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def _is_file(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) or (hasattr(value, "read") and not isinstance(value, str))


def _read(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    content = value.read()
    if isinstance(content, str):
        content = content.encode("utf-8")
    return content


def _filename(value: Any, fallback: str) -> str:
    name = getattr(value, "name", None)
    if isinstance(name, str) and name:
        return os.path.basename(name)
    return fallback
