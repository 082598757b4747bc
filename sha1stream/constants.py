from typing import Tuple

BLOCK_SIZE = 64
DIGEST_SIZE = 20
# offset of the 64-bit big-endian message length inside the last block
LENGTH_OFFSET = BLOCK_SIZE - 8

WORD_MASK = 0xFFFFFFFF
LENGTH_MASK = (1 << 64) - 1

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# one constant per 20-round quadrant
ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

PAD_BYTE = 0x80
DEFAULT_CHUNK_SIZE = 8192

State = Tuple[int, int, int, int, int]
Digest = bytes
