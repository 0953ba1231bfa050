"""Server-sent event decoding pipeline.

Three composable async generator stages turn the raw lines of a 200 response
into text:

``iter_fragments``
    Protocol framing. A line containing ``[DONE]`` ends the sequence and no
    further line is read. A line starting with ``data: `` yields the JSON
    fragment after the prefix. Anything else (blank keep-alives, comments) is
    discarded.

``iter_envelopes``
    Decodes each fragment into a typed envelope with the wire codec. A
    fragment that does not match the shape raises :class:`DecodeError` and
    terminates the stream.

``iter_contents``
    Yields each envelope's ``text``. Envelopes with no choices, or whose
    first choice has no content (role announcements, finish markers), are
    skipped. Skips are normal flow; they are only visible as DEBUG
    ``stream.fragment_skipped`` log events.
"""
from __future__ import annotations

import logging
from typing import AsyncIterable, AsyncIterator, Optional, Type, TypeVar

from .. import codec
from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..logging import LogContext, get_logger, log_event
from ..models import ResponseEnvelope

E = TypeVar("E", bound=ResponseEnvelope)

_logger = get_logger("gpt_client.stream")


async def iter_fragments(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    """Yield the JSON fragment of every ``data:`` line until ``[DONE]``."""
    async for line in lines:
        if SSE_DONE_SENTINEL in line:
            return
        if line.startswith(SSE_DATA_PREFIX):
            yield line[len(SSE_DATA_PREFIX):]


async def iter_envelopes(fragments: AsyncIterable[str], shape: Type[E]) -> AsyncIterator[E]:
    """Decode every fragment into ``shape``."""
    async for fragment in fragments:
        yield codec.decode(fragment, shape)


async def iter_contents(
    envelopes: AsyncIterable[ResponseEnvelope],
    ctx: Optional[LogContext] = None,
) -> AsyncIterator[str]:
    """Yield the first-choice content of each envelope, skipping empty ones."""
    async for envelope in envelopes:
        if not envelope.choices:
            log_event(_logger, "stream.fragment_skipped", ctx, level=logging.DEBUG, reason="no_choices")
            continue
        text = envelope.text
        if text is None:
            log_event(
                _logger,
                "stream.fragment_skipped",
                ctx,
                level=logging.DEBUG,
                reason="no_content",
                finish_reason=envelope.choices[0].finish_reason,
            )
            continue
        yield text


def decode_stream(lines: AsyncIterable[str], shape: Type[ResponseEnvelope], ctx: Optional[LogContext] = None) -> AsyncIterator[str]:
    """Compose the three stages: raw lines in, content strings out."""
    return iter_contents(iter_envelopes(iter_fragments(lines), shape), ctx)


__all__ = ["iter_fragments", "iter_envelopes", "iter_contents", "decode_stream"]
