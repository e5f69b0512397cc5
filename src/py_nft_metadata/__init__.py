"""Schema library for NFT metadata documents."""

from py_nft_metadata.exceptions import MetadataError, MissingField, TypeMismatch
from py_nft_metadata.models import (
    PERMISSIVE,
    SEMI_STRICT,
    STRICT,
    AssetFile,
    Attribute,
    Metadata,
    ModelFamily,
    Properties,
    Record,
    family,
)
from py_nft_metadata.modes import DEFAULT_MODE, PolicyMode
from py_nft_metadata.nep177 import NftMetadata, reference_hash, to_token_metadata
from py_nft_metadata.schema import json_schema, record_schema, required_fields
from py_nft_metadata.serialization import convert, dumps, from_dict, loads, to_dict

__all__ = [
    "Metadata",
    "Attribute",
    "Properties",
    "AssetFile",
    "Record",
    "ModelFamily",
    "PERMISSIVE",
    "SEMI_STRICT",
    "STRICT",
    "family",
    "PolicyMode",
    "DEFAULT_MODE",
    "MetadataError",
    "MissingField",
    "TypeMismatch",
    "dumps",
    "loads",
    "to_dict",
    "from_dict",
    "convert",
    "json_schema",
    "record_schema",
    "required_fields",
    "NftMetadata",
    "reference_hash",
    "to_token_metadata",
]
