"""JSON (de)serialization entry points for metadata records."""

from typing import Any, Dict, Optional, Type, Union

from loguru import logger

from py_nft_metadata.models import Record, family
from py_nft_metadata.modes import DEFAULT_MODE, PolicyMode

RecordRef = Union[str, Type[Record]]


def resolve_record(record: RecordRef, mode: Union[PolicyMode, str] = DEFAULT_MODE) -> Type[Record]:
    """
    Resolve a record reference to a model class.

    Args:
        record: Record class, or record name such as "Metadata" or "asset_file"
        mode: Policy mode used to look up record names; ignored for classes

    Returns:
        Record model class
    """
    if isinstance(record, str):
        return family(mode).record(record)
    return record


def to_dict(record: Record) -> Dict[str, Any]:
    return record.to_dict()


def dumps(record: Record, indent: Optional[int] = None) -> str:
    """
    Serialize a record to JSON text.

    Unset optional fields are omitted and ``file_type`` is written as ``type``.
    """
    return record.to_json(indent=indent)


def from_dict(
    data: Any,
    record: RecordRef = "Metadata",
    mode: Union[PolicyMode, str] = DEFAULT_MODE,
) -> Record:
    """
    Validate a decoded JSON document as a record.

    Args:
        data: Decoded JSON document
        record: Record class or name to decode into
        mode: Policy mode used when ``record`` is a name

    Returns:
        Validated record

    Raises:
        MissingField: A field required by the mode is absent
        TypeMismatch: A field has the wrong JSON shape
    """
    return resolve_record(record, mode).from_dict(data)


def loads(
    text: Union[str, bytes],
    record: RecordRef = "Metadata",
    mode: Union[PolicyMode, str] = DEFAULT_MODE,
) -> Record:
    """
    Parse JSON text as a record.

    Raises:
        MissingField: A field required by the mode is absent
        TypeMismatch: A field has the wrong JSON shape, or the text is not JSON
    """
    return resolve_record(record, mode).from_json(text)


def convert(record: Record, mode: Union[PolicyMode, str]) -> Record:
    """
    Re-validate a record under another policy mode.

    Used to upgrade documents read in a compatibility mode to the canonical one.

    Raises:
        MissingField: The target mode requires a field the record does not set
    """
    mode = PolicyMode(mode)
    target = family(mode).record(type(record).__name__)
    logger.debug(f"Convert {type(record).__name__} from {record.policy_mode.value} to {mode.value}")
    return target.from_dict(record.to_dict())
