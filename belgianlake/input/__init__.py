"""Input-layer public API for raw key decoding.

Token-to-event mapping lives in ``belgianlake.input.keys``; it depends on the
controller, so it is not imported here.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "_PENDING_BYTES",
    "read_key",
]
