import pytest

from py_nft_metadata import (
    PERMISSIVE,
    STRICT,
    AssetFile,
    Attribute,
    Metadata,
    MissingField,
    Properties,
    TypeMismatch,
)


def test_builder_matches_direct_construction(sword):
    built = (
        Metadata.new()
        .with_name("Sword")
        .with_description("A sharp blade")
        .with_image("ipfs://abc")
        .with_attributes([Attribute.new().with_trait_type("Rarity").with_value("Legendary")])
        .with_properties(
            Properties.new()
            .with_category("image")
            .with_files([AssetFile.new().with_uri("ipfs://def").with_file_type("image/png").with_size(2048)])
        )
    )
    assert built == sword


def test_permissive_builder():
    attribute = PERMISSIVE.attribute.new().with_trait_type("Color")
    assert attribute.trait_type == "Color"
    assert attribute.value is None
    assert attribute == PERMISSIVE.attribute(trait_type="Color")


def test_builder_returns_new_instance():
    metadata = Metadata.new()
    named = metadata.with_name("Sword")
    assert metadata.name is None
    assert named.name == "Sword"


def test_builder_validates_value():
    with pytest.raises(TypeMismatch) as exc:
        AssetFile.new().with_size(-1)
    assert exc.value.field == "size"
    assert exc.value.expected == "non-negative integer"


def test_default_semi_strict():
    assert Metadata.new() == Metadata()
    assert Metadata.new().attributes is None
    assert Attribute.new() == Attribute(trait_type="", value="")
    assert Properties.new().files == []

    asset_file = AssetFile.new()
    assert asset_file.uri == ""
    assert asset_file.file_type == ""
    assert asset_file.cdn is None
    assert asset_file.size is None


def test_default_permissive():
    asset_file = PERMISSIVE.asset_file.new()
    assert asset_file.uri is None
    assert asset_file.file_type is None
    assert PERMISSIVE.properties.new().files is None


def test_default_strict_placeholder():
    metadata = STRICT.metadata.new()
    assert metadata.name == ""
    assert metadata.external_url == ""
    assert metadata.attributes == []
    assert metadata.properties == STRICT.properties(category="", files=[])


def test_strict_has_no_builders():
    assert not hasattr(STRICT.metadata, "with_name")
    assert not hasattr(STRICT.asset_file, "with_uri")
    assert hasattr(STRICT.asset_file, "with_cdn")
    assert hasattr(PERMISSIVE.metadata, "with_name")


def test_constructor_requires_fields():
    with pytest.raises(MissingField) as exc:
        Attribute(trait_type="Color")
    assert exc.value.name == "value"
    assert exc.value.record == "Attribute"

    with pytest.raises(MissingField) as exc:
        STRICT.metadata(name="Sword")
    assert exc.value.name == "description"


def test_file_type_accepts_wire_name():
    assert AssetFile(uri="ipfs://def", type="image/png").file_type == "image/png"
    assert AssetFile(uri="ipfs://def", file_type="image/png").file_type == "image/png"


def test_set_cdn_overwrites():
    asset_file = AssetFile(uri="ipfs://def", file_type="image/png")
    assert asset_file.cdn is None

    asset_file.set_cdn(True)
    asset_file.set_cdn(False)
    assert asset_file.cdn is False
    assert asset_file.to_dict()["cdn"] is False


def test_set_cdn_rejects_non_bool():
    asset_file = AssetFile(uri="ipfs://def", file_type="image/png")
    with pytest.raises(TypeMismatch):
        asset_file.set_cdn("yes")
    assert asset_file.cdn is None


def test_with_cdn():
    asset_file = AssetFile(uri="ipfs://def", file_type="image/png")
    served = asset_file.with_cdn()
    assert served.cdn is True
    assert asset_file.cdn is None

    strict_file = STRICT.asset_file(uri="ipfs://def", file_type="image/png").with_cdn()
    assert strict_file.cdn is True


def test_family_lookup():
    assert PERMISSIVE.record("asset_file") is PERMISSIVE.asset_file
    assert PERMISSIVE.record("AssetFile") is PERMISSIVE.asset_file
    with pytest.raises(KeyError):
        PERMISSIVE.record("Token")


def test_nested_records_are_copied():
    asset_file = AssetFile(uri="ipfs://def", file_type="image/png")
    properties = Properties(category="image", files=[asset_file])
    metadata = Metadata.new().with_properties(properties)

    asset_file.set_cdn(True)
    properties.category = "video"
    assert properties.files[0].cdn is None
    assert metadata.properties.files[0].cdn is None
    assert metadata.properties.category == "image"


def test_builder_rejects_record_of_other_mode():
    with pytest.raises(TypeMismatch) as exc:
        Metadata.new().with_attributes([PERMISSIVE.attribute(trait_type="Color", value="Blue")])
    assert exc.value.path == "attributes[0]"
    assert exc.value.actual == "Attribute (permissive)"
