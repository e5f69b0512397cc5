import pytest

from py_nft_metadata import AssetFile, Attribute, Metadata, Properties


@pytest.fixture
def sword() -> Metadata:
    return Metadata(
        name="Sword",
        description="A sharp blade",
        image="ipfs://abc",
        attributes=[Attribute(trait_type="Rarity", value="Legendary")],
        properties=Properties(
            category="image",
            files=[AssetFile(uri="ipfs://def", file_type="image/png", size=2048)],
        ),
    )


@pytest.fixture
def full_document() -> dict:
    return {
        "name": "Shield",
        "description": "Blocks most things",
        "image": "ipfs://shield.png",
        "animation_url": "ipfs://shield.glb",
        "external_url": "https://example.com/items/shield",
        "attributes": [
            {"trait_type": "Material", "value": "Oak"},
            {"trait_type": "Material", "value": "Oak"},
        ],
        "properties": {
            "category": "video",
            "files": [
                {
                    "uri": "https://cdn.example.com/shield.mp4",
                    "type": "video/mp4",
                    "cdn": True,
                    "resolution": "1920x1080",
                    "size": 0,
                },
                {"uri": "ipfs://shield.png", "type": "image/png"},
            ],
        },
    }
