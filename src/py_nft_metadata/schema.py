"""JSON Schema export of the metadata record types."""

from typing import Any, Dict, Union

from pydantic.json_schema import models_json_schema

from py_nft_metadata.constants import SCHEMA_DIALECT, SCHEMA_TITLE
from py_nft_metadata.models import family
from py_nft_metadata.modes import DEFAULT_MODE, PolicyMode
from py_nft_metadata.serialization import RecordRef, resolve_record


def record_schema(record: RecordRef, mode: Union[PolicyMode, str] = DEFAULT_MODE) -> Dict[str, Any]:
    """
    JSON Schema of a single record type.

    Nested record types are placed under ``$defs``. Optional fields are nullable
    and absent from ``required``.
    """
    return resolve_record(record, mode).model_json_schema(by_alias=True)


def json_schema(mode: Union[PolicyMode, str] = DEFAULT_MODE) -> Dict[str, Any]:
    """
    JSON Schema describing all four record types of a policy mode.

    The document validates a ``Metadata`` document at its root; every record is
    available under ``$defs`` for validating fragments.
    """
    mode = PolicyMode(mode)
    models = family(mode).records()
    _, definitions = models_json_schema(
        [(model, "validation") for model in models],
        by_alias=True,
        title=SCHEMA_TITLE,
    )
    return {
        "$schema": SCHEMA_DIALECT,
        "title": SCHEMA_TITLE,
        "description": f"NFT metadata document ({mode.value} mode)",
        "$ref": "#/$defs/Metadata",
        "$defs": definitions["$defs"],
    }


def required_fields(record: RecordRef, mode: Union[PolicyMode, str] = DEFAULT_MODE) -> list:
    """Wire names of the fields a mode requires for a record type."""
    return record_schema(record, mode).get("required", [])
