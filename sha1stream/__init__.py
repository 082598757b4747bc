"""Streaming SHA-1 digest engine."""

from sha1stream.constants import BLOCK_SIZE, DIGEST_SIZE
from sha1stream.context import SHA1Context, init
from sha1stream.engine import ContextFinalizedError, final, update
from sha1stream.hasher import SHA1, hash_file, hash_stream, sha1, sha1_hex, sha1_text
from sha1stream.transform import transform

__all__ = [
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "ContextFinalizedError",
    "SHA1",
    "SHA1Context",
    "final",
    "hash_file",
    "hash_stream",
    "init",
    "sha1",
    "sha1_hex",
    "sha1_text",
    "transform",
    "update",
]
