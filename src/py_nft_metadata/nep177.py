"""Optional bridge from off-chain metadata documents to NEAR NEP-177 token metadata."""

import base64
from hashlib import sha256
from typing import Optional

from loguru import logger
from pydantic import BaseModel

from py_nft_metadata.models import Record


class NftMetadata(BaseModel):
    """
    On-chain token metadata of a NEAR NFT contract.

    Only the fields filled from an off-chain document are documented here.

    Attributes:
        title: Token title, taken from ``Metadata.name``.
        media: Media URL, taken from ``Metadata.image``.
        media_hash: Base64 sha256 of the content behind ``media``.
        reference: URL of the published off-chain document.
        reference_hash: Base64 sha256 of the published document.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    media: Optional[str] = None
    media_hash: Optional[str] = None
    copies: Optional[int] = None
    issued_at: Optional[str] = None
    expires_at: Optional[str] = None
    starts_at: Optional[str] = None
    updated_at: Optional[str] = None
    extra: Optional[str] = None
    reference: Optional[str] = None
    reference_hash: Optional[str] = None


def reference_hash(metadata: Record) -> str:
    """
    Hash of an off-chain metadata document.

    The document must be published exactly as ``metadata.to_json()`` for the
    hash to match what wallets download from ``reference``.

    Returns:
        Base64-encoded sha256 of the JSON text
    """
    return base64.b64encode(sha256(metadata.to_json().encode("utf-8")).digest()).decode()


def to_token_metadata(
    metadata: Record,
    reference: str,
    media_hash: Optional[str] = None,
    copies: Optional[int] = None,
    extra: Optional[str] = None,
) -> NftMetadata:
    """
    Build NEP-177 token metadata pointing at an off-chain document.

    Args:
        metadata: Off-chain ``Metadata`` record of any policy mode
        reference: URL where the document is published
        media_hash: Base64 sha256 of the image behind ``metadata.image``
        copies: Number of copies minted with this metadata
        extra: Extra on-chain data

    Returns:
        NftMetadata with ``reference_hash`` computed from the document
    """
    token = NftMetadata(
        title=metadata.name,
        description=metadata.description,
        media=metadata.image,
        media_hash=media_hash,
        copies=copies,
        extra=extra,
        reference=reference,
        reference_hash=reference_hash(metadata),
    )
    if token.media and not token.media_hash:
        logger.warning(f"NEP-177 media_hash is not set for media {token.media}")
    return token
