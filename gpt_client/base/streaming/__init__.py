"""Streaming package: SSE decoding stages and the closable stream wrapper."""

from .decoder import decode_stream, iter_contents, iter_envelopes, iter_fragments
from .stream_response import StreamResponse

__all__ = [
    "StreamResponse",
    "decode_stream",
    "iter_fragments",
    "iter_envelopes",
    "iter_contents",
]
