from __future__ import annotations

import logging
from typing import Optional, Union

from sha1stream.constants import (
    BLOCK_SIZE,
    LENGTH_MASK,
    LENGTH_OFFSET,
    PAD_BYTE,
    Digest,
)
from sha1stream.context import SHA1Context
from sha1stream.transform import transform, unpack_words

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview]


class ContextFinalizedError(RuntimeError):
    """Raised when a context is used after ``final`` has consumed it."""


def _to_bytes(data: BufferLike) -> memoryview:
    """Return the input as a flat byte view, raising ``TypeError`` for unsupported types."""

    if isinstance(data, (bytes, bytearray)):
        return memoryview(data)

    if isinstance(data, memoryview):
        if data.format not in ("B", "b", "c"):
            raise TypeError("memoryview must be of a byte-oriented format")
        if data.ndim == 1 and data.c_contiguous:
            return data.cast("B")
        return memoryview(data.tobytes())

    raise TypeError("data must be bytes-like")


def _ensure_open(ctx: SHA1Context, operation: str) -> None:
    if ctx.finalized:
        logger.error("%s called on a finalized SHA-1 context", operation)
        raise ContextFinalizedError(f"cannot {operation} a finalized SHA-1 context")


def _absorb_block(ctx: SHA1Context) -> None:
    ctx.state = transform(ctx.state, ctx.pending)
    ctx.total_bits = (ctx.total_bits + BLOCK_SIZE * 8) & LENGTH_MASK
    ctx.pending_len = 0


def update(ctx: SHA1Context, data: BufferLike, length: Optional[int] = None) -> None:
    """Feed ``data`` (or its first ``length`` bytes) into the running digest."""
    _ensure_open(ctx, "update")
    view = _to_bytes(data)
    if length is not None:
        if length < 0 or length > len(view):
            raise ValueError(f"length must be within [0, {len(view)}], got {length}")
        view = view[:length]

    offset = 0
    blocks = 0
    while offset < len(view):
        take = min(BLOCK_SIZE - ctx.pending_len, len(view) - offset)
        ctx.pending[ctx.pending_len : ctx.pending_len + take] = view[offset : offset + take]
        ctx.pending_len += take
        offset += take
        if ctx.pending_len == BLOCK_SIZE:
            _absorb_block(ctx)
            blocks += 1

    logger.debug("absorbed %d bytes, %d full blocks, %d pending", len(view), blocks, ctx.pending_len)


def final(ctx: SHA1Context) -> Digest:
    """Pad the message, append its bit length and return the 20-byte digest.

    The context is consumed: any further ``update`` or ``final`` raises
    :class:`ContextFinalizedError`.
    """
    _ensure_open(ctx, "finalize")
    pending_len = ctx.pending_len
    pending = ctx.pending

    i = pending_len
    pending[i] = PAD_BYTE
    i += 1

    if i <= LENGTH_OFFSET:
        pending[i:LENGTH_OFFSET] = bytes(LENGTH_OFFSET - i)
    else:
        # no room left for the length field, spill into one more block
        pending[i:BLOCK_SIZE] = bytes(BLOCK_SIZE - i)
        ctx.state = transform(ctx.state, pending)
        pending[:LENGTH_OFFSET] = bytes(LENGTH_OFFSET)
        logger.debug("padding spilled into an extra block (%d bytes buffered)", pending_len)

    ctx.total_bits = (ctx.total_bits + pending_len * 8) & LENGTH_MASK
    pending[LENGTH_OFFSET:BLOCK_SIZE] = ctx.total_bits.to_bytes(8, "big")
    ctx.state = transform(ctx.state, pending)

    ctx.pending_len = 0
    ctx.finalized = True
    logger.debug("finalized SHA-1 context after %d message bits", ctx.total_bits)
    return unpack_words(ctx.state)
