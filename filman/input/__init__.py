"""Input-layer public API: raw key decoding and the prompt line editor.

Mode dispatch lives in ``filman.input.keys``; it is not re-exported here so
that importing the prompt editor never pulls in session state.
"""

from .prompt import PromptReader
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "PromptReader",
]
