"""Constants for metadata schema operations."""

# Title of the exported JSON Schema document
SCHEMA_TITLE = "NFT Metadata"

# JSON Schema dialect produced by pydantic
SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# Fields serialized under a different name than the attribute name
WIRE_NAMES: dict[str, str] = {"file_type": "type"}

# Placeholder stored in required text fields by default construction
EMPTY_TEXT = ""

# Path label used for errors raised on the document itself
ROOT_PATH = "$"
