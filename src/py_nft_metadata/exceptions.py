"""Exceptions for metadata (de)serialization."""

from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError

from py_nft_metadata.constants import ROOT_PATH


class MetadataError(ValueError):
    """Base error for documents that do not match the metadata schema."""

    def __init__(self, message: str, path: str, record: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.record = record


class MissingField(MetadataError):
    """
    Required field is absent from the document.

    Attributes:
        name: Field name as it appears on the wire.
        path: Dotted location of the field, e.g. ``properties.files[0].uri``.
        record: Name of the record type being decoded.
    """

    def __init__(self, name: str, path: Optional[str] = None, record: Optional[str] = None):
        self.name = name
        path = path or name
        super().__init__(f"missing field `{name}` at {path}", path, record)


class TypeMismatch(MetadataError):
    """
    Field value has the wrong shape.

    Attributes:
        field: Field name as it appears on the wire.
        expected: Expected JSON shape, e.g. ``non-negative integer``.
        actual: Shape that was found instead.
    """

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        path: Optional[str] = None,
        record: Optional[str] = None,
    ):
        self.field = field
        self.expected = expected
        self.actual = actual
        path = path or field
        super().__init__(
            f"invalid type at {path}: expected {expected}, found {actual}", path, record
        )


_EXPECTED_BY_ERROR = {
    "string_type": "string",
    "bool_type": "boolean",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "greater_than_equal": "non-negative integer",
    "less_than_equal": "64-bit unsigned integer",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "json_invalid": "JSON document",
    "json_type": "JSON document",
}


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return f"integer {value}"
    if isinstance(value, float):
        return f"number {value}"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, BaseModel):
        mode = getattr(value, "policy_mode", None)
        return f"{type(value).__name__} ({mode.value})" if mode else type(value).__name__
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _path(loc: Tuple[Union[str, int], ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or ROOT_PATH


def from_validation_error(exc: ValidationError, record: Optional[str] = None) -> MetadataError:
    """
    Translate the first pydantic error into a metadata error.

    Args:
        exc: Error raised by pydantic while validating a record
        record: Name of the record type being validated

    Returns:
        MissingField for absent required fields, TypeMismatch otherwise
    """
    error = exc.errors(include_url=False)[0]
    loc = error["loc"]
    path = _path(loc)
    names = [part for part in loc if isinstance(part, str)]
    field = names[-1] if names else ROOT_PATH

    if error["type"] == "missing":
        return MissingField(field, path=path, record=record)
    if error["type"] in ("json_invalid", "json_type"):
        actual = error.get("ctx", {}).get("error", "invalid JSON")
    else:
        actual = _json_type(error.get("input"))
    expected = _EXPECTED_BY_ERROR.get(error["type"], error["msg"])
    if error["type"] == "model_type" and "class_name" in error.get("ctx", {}):
        expected = f"{error['ctx']['class_name']} object"
    return TypeMismatch(field, expected, actual, path=path, record=record)
