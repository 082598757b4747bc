"""SHA-1 compression function.

Folds one 64-byte block into the five-word running state.  Words are packed
and unpacked big-endian through numpy's ``>u4`` dtype, so the result does not
depend on the host byte order.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from sha1stream.constants import BLOCK_SIZE, ROUND_CONSTANTS, WORD_MASK, State

BIG_ENDIAN_WORD = np.dtype(">u4")


def left_rotate(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & WORD_MASK


def pack_words(block: bytes) -> List[int]:
    return np.frombuffer(block, dtype=BIG_ENDIAN_WORD).tolist()


def unpack_words(words: Sequence[int]) -> bytes:
    return np.array(words, dtype=BIG_ENDIAN_WORD).tobytes()


def message_schedule(block: bytes) -> List[int]:
    """Expand a block into the 80-word schedule driving the rounds."""
    if len(block) != BLOCK_SIZE:
        raise ValueError("Block size must be exactly 64 bytes")

    w = pack_words(block)
    for i in range(16, 80):
        w.append(left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def transform(state: Sequence[int], block: bytes) -> State:
    if len(state) != 5:
        raise ValueError("State must hold exactly 5 words")

    w = message_schedule(block)
    a, b, c, d, e = state

    for i in range(80):
        if i < 20:
            f = (b & c) | ((~b & WORD_MASK) & d)
        elif i < 40:
            f = b ^ c ^ d
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d
        k = ROUND_CONSTANTS[i // 20]

        temp = (left_rotate(a, 5) + f + e + k + w[i]) & WORD_MASK
        e = d
        d = c
        c = left_rotate(b, 30)
        b = a
        a = temp

    return (
        (state[0] + a) & WORD_MASK,
        (state[1] + b) & WORD_MASK,
        (state[2] + c) & WORD_MASK,
        (state[3] + d) & WORD_MASK,
        (state[4] + e) & WORD_MASK,
    )
