"""
Content-derived receipt identifiers.

The id is a name-based UUID (version 5 construction) in the OID namespace,
computed over the SHA-256 digest of the receipt's canonical JSON. Identical
content always yields the same id, which makes resubmission idempotent.
"""
from __future__ import annotations

import hashlib
import json
import uuid

from app.schemas import Receipt

NAMESPACE = uuid.NAMESPACE_OID


def canonical_bytes(receipt: Receipt) -> bytes:
    """Serialize the receipt in fixed field order as compact UTF-8 JSON."""
    payload = {
        "retailer": receipt.retailer,
        "purchaseDate": receipt.purchase_date,
        "purchaseTime": receipt.purchase_time,
        "items": [
            {"shortDescription": item.short_description, "price": item.price}
            for item in receipt.items
        ],
        "total": receipt.total,
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def content_hash(receipt: Receipt) -> bytes:
    return hashlib.sha256(canonical_bytes(receipt)).digest()


def name_based_uuid(namespace: uuid.UUID, name: bytes) -> uuid.UUID:
    # same construction as uuid.uuid5, over raw bytes instead of a str name
    digest = hashlib.sha1(namespace.bytes + name).digest()
    return uuid.UUID(bytes=digest[:16], version=5)


def receipt_id(receipt: Receipt) -> str:
    return str(name_based_uuid(NAMESPACE, content_hash(receipt)))
