"""
Error kinds raised by the receipt pipeline.

Field-level parse failures (``MalformedField`` subclasses) are recovered inside
scoring; ``ReceiptNotFound`` is surfaced to the caller.
"""
from __future__ import annotations


class ReceiptError(Exception):
    """Base class for receipt pipeline errors."""


class MalformedField(ReceiptError, ValueError):
    field_name = "field"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed {self.field_name}: {value!r}")


class MalformedPrice(MalformedField):
    field_name = "price"


class MalformedDate(MalformedField):
    field_name = "purchase date"


class MalformedTime(MalformedField):
    field_name = "purchase time"


class ReceiptNotFound(ReceiptError, LookupError):
    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(f"No receipt found for id {receipt_id!r}")
