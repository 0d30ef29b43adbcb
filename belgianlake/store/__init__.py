"""Record persistence: JSON-lines store, record type, and background writer."""

from .errors import RecordFormatError, RecordStoreError, StoreIOError
from .jsonl import DEFAULT_STORE_FILENAME, RecordStore, decode_record, encode_record
from .types import Record, Records
from .writer import SaveRequest, SaveResult, SaveScheduler

__all__ = [
    "DEFAULT_STORE_FILENAME",
    "Record",
    "Records",
    "RecordFormatError",
    "RecordStore",
    "RecordStoreError",
    "SaveRequest",
    "SaveResult",
    "SaveScheduler",
    "StoreIOError",
    "decode_record",
    "encode_record",
]
