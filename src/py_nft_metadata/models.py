"""
Record types of an NFT metadata document.

The four records (``Metadata``, ``Attribute``, ``Properties``, ``AssetFile``)
are generated once per policy mode from a single field table, so the three
families always agree on field names, types, descriptions and wire names and
only differ in which fields are required.
"""

from typing import Annotated, Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple, Type, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, create_model

from py_nft_metadata.constants import EMPTY_TEXT, WIRE_NAMES
from py_nft_metadata.exceptions import TypeMismatch, from_validation_error
from py_nft_metadata.modes import CONSTRAINED, DEFAULT_MODE, STRICT_ONLY, PolicyMode

# u64 on the wire
FileSize = Annotated[StrictInt, Field(ge=0, le=2**64 - 1)]


class FieldSpec(NamedTuple):
    """
    One field of a record type.

    Attributes:
        name: Attribute name; the wire name comes from ``WIRE_NAMES`` when renamed.
        annotation: Value type, or the name of another record type.
        description: Documentation exported into the JSON Schema.
        required_in: Policy modes in which the field is mandatory.
        sequence: Whether the field holds an ordered list of ``annotation``.
    """

    name: str
    annotation: Any
    description: str
    required_in: frozenset = frozenset()
    sequence: bool = False


RECORD_FIELDS: Dict[str, Tuple[FieldSpec, ...]] = {
    "AssetFile": (
        FieldSpec("uri", StrictStr, "The file's URI", CONSTRAINED),
        FieldSpec("file_type", StrictStr, "The file's type", CONSTRAINED),
        FieldSpec("cdn", StrictBool, "Whether the file is served from a CDN."),
        FieldSpec("resolution", StrictStr, "Defines the file's resolution if applicable"),
        FieldSpec("size", FileSize, "The file's size in bytes if applicable"),
    ),
    "Attribute": (
        FieldSpec("trait_type", StrictStr, "The type of attribute", CONSTRAINED),
        FieldSpec("value", StrictStr, "The value for that attribute", CONSTRAINED),
    ),
    "Properties": (
        FieldSpec("category", StrictStr, "A media category for the asset", CONSTRAINED),
        FieldSpec(
            "files", "AssetFile", "Additional files to include with the asset", CONSTRAINED, sequence=True
        ),
    ),
    "Metadata": (
        FieldSpec("name", StrictStr, "Name of the asset", STRICT_ONLY),
        FieldSpec("description", StrictStr, "Description of the asset", STRICT_ONLY),
        FieldSpec("image", StrictStr, "URI pointing to the asset's logo", STRICT_ONLY),
        FieldSpec("animation_url", StrictStr, "URI pointing to the asset's animation", STRICT_ONLY),
        FieldSpec("external_url", StrictStr, "URI pointing to an external URL defining the asset", STRICT_ONLY),
        FieldSpec(
            "attributes",
            "Attribute",
            "Array of attributes defining the characteristics of the asset",
            STRICT_ONLY,
            sequence=True,
        ),
        FieldSpec("properties", "Properties", "Additional properties that define the asset", STRICT_ONLY),
    ),
}


class Record(BaseModel):
    """Base model for all metadata records."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True, revalidate_instances="always")

    policy_mode: ClassVar[PolicyMode] = DEFAULT_MODE
    field_specs: ClassVar[Tuple[FieldSpec, ...]] = ()

    def __init__(self, **data: Any):
        data = {WIRE_NAMES.get(key, key): value for key, value in data.items()}
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise from_validation_error(e, type(self).__name__) from e

    # Only called for direct construction; nested validation builds records without it
    __init__.__pydantic_base_init__ = True

    @classmethod
    def new(cls):
        """
        Build a default instance.

        Optional fields are left unset, required text fields are empty and
        required sequences are empty. In strict mode the result is a placeholder
        that callers must complete before use.
        """
        values = {}
        for spec in cls.field_specs:
            if cls.policy_mode not in spec.required_in:
                continue
            if spec.sequence:
                values[spec.name] = []
            elif isinstance(spec.annotation, str):
                values[spec.name] = cls.model_fields[spec.name].annotation.new()
            else:
                values[spec.name] = EMPTY_TEXT
        return cls(**values)

    @classmethod
    def from_dict(cls, data: Any):
        """Validate a decoded JSON document."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise from_validation_error(e, cls.__name__) from e

    @classmethod
    def from_json(cls, text: Union[str, bytes]):
        """Parse and validate a JSON document."""
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise from_validation_error(e, cls.__name__) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dict, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def _assign(self, name: str, value: Any) -> None:
        try:
            setattr(self, name, value)
        except ValidationError as e:
            raise from_validation_error(e, type(self).__name__) from e

    def _with(self, **changes: Any):
        record = self.model_copy(deep=True)
        for name, value in changes.items():
            record._assign(name, value)
        return record


class AssetFileBase(Record):
    def set_cdn(self, cdn: bool) -> None:
        """Overwrite the CDN flag in place."""
        if not isinstance(cdn, bool):
            raise TypeMismatch("cdn", "boolean", type(cdn).__name__, record=type(self).__name__)
        self._assign("cdn", cdn)

    def with_cdn(self):
        """Return a copy marked as served from a CDN."""
        return self._with(cdn=True)


class AssetFileBuilder(AssetFileBase):
    def with_uri(self, uri: str):
        return self._with(uri=uri)

    def with_file_type(self, file_type: str):
        return self._with(file_type=file_type)

    def with_resolution(self, resolution: str):
        return self._with(resolution=resolution)

    def with_size(self, size: int):
        return self._with(size=size)


class AttributeBuilder(Record):
    def with_trait_type(self, trait_type: str):
        return self._with(trait_type=trait_type)

    def with_value(self, value: str):
        return self._with(value=value)


class PropertiesBuilder(Record):
    def with_category(self, category: str):
        return self._with(category=category)

    def with_files(self, files: list):
        return self._with(files=files)


class MetadataBuilder(Record):
    def with_name(self, name: str):
        return self._with(name=name)

    def with_description(self, description: str):
        return self._with(description=description)

    def with_image(self, image: str):
        return self._with(image=image)

    def with_animation_url(self, animation_url: str):
        return self._with(animation_url=animation_url)

    def with_external_url(self, external_url: str):
        return self._with(external_url=external_url)

    def with_attributes(self, attributes: list):
        return self._with(attributes=attributes)

    def with_properties(self, properties: Record):
        return self._with(properties=properties)


# Records are built in dependency order so nested types already exist
_BUILD_ORDER = ("AssetFile", "Attribute", "Properties", "Metadata")

_BASES: Dict[str, Tuple[Type[Record], Type[Record]]] = {
    # name: (strict base, builder base)
    "AssetFile": (AssetFileBase, AssetFileBuilder),
    "Attribute": (Record, AttributeBuilder),
    "Properties": (Record, PropertiesBuilder),
    "Metadata": (Record, MetadataBuilder),
}

_ALIASES = {
    "asset_file": "AssetFile",
    "attribute": "Attribute",
    "properties": "Properties",
    "metadata": "Metadata",
}


class ModelFamily(NamedTuple):
    """The four record types generated for one policy mode."""

    mode: PolicyMode
    metadata: Type[Record]
    attribute: Type[Record]
    properties: Type[Record]
    asset_file: Type[Record]

    def records(self) -> List[Type[Record]]:
        return [self.metadata, self.attribute, self.properties, self.asset_file]

    def record(self, name: str) -> Type[Record]:
        """
        Look up a record type by class name (``AssetFile``) or attribute name (``asset_file``).

        Raises:
            KeyError: If no record type has that name
        """
        name = _ALIASES.get(name, name)
        for model in self.records():
            if model.__name__ == name:
                return model
        raise KeyError(f"Unknown record type {name!r}")


def _field_definition(spec: FieldSpec, mode: PolicyMode, built: Dict[str, Type[Record]]):
    annotation = built[spec.annotation] if isinstance(spec.annotation, str) else spec.annotation
    if spec.sequence:
        annotation = List[annotation]
    alias = WIRE_NAMES.get(spec.name)
    if mode in spec.required_in:
        return annotation, Field(..., alias=alias, description=spec.description)
    return Optional[annotation], Field(None, alias=alias, description=spec.description)


def _build_family(mode: PolicyMode) -> ModelFamily:
    built: Dict[str, Type[Record]] = {}
    for name in _BUILD_ORDER:
        strict_base, builder_base = _BASES[name]
        specs = RECORD_FIELDS[name]
        model = create_model(
            name,
            __base__=builder_base if mode.has_builders else strict_base,
            __module__=__name__,
            __doc__=f"{name} record ({mode.value} mode).",
            **{spec.name: _field_definition(spec, mode, built) for spec in specs},
        )
        model.policy_mode = mode
        model.field_specs = specs
        built[name] = model
    logger.debug(f"Built {mode.value} metadata models: {', '.join(built)}")
    return ModelFamily(
        mode=mode,
        metadata=built["Metadata"],
        attribute=built["Attribute"],
        properties=built["Properties"],
        asset_file=built["AssetFile"],
    )


PERMISSIVE = _build_family(PolicyMode.PERMISSIVE)
SEMI_STRICT = _build_family(PolicyMode.SEMI_STRICT)
STRICT = _build_family(PolicyMode.STRICT)

_FAMILIES = {family.mode: family for family in (PERMISSIVE, SEMI_STRICT, STRICT)}


def family(mode: Union[PolicyMode, str] = DEFAULT_MODE) -> ModelFamily:
    """Return the record types for a policy mode."""
    return _FAMILIES[PolicyMode(mode)]


# Record types of the canonical mode
Metadata = SEMI_STRICT.metadata
Attribute = SEMI_STRICT.attribute
Properties = SEMI_STRICT.properties
AssetFile = SEMI_STRICT.asset_file
