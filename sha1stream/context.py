from __future__ import annotations

from dataclasses import dataclass, field

from sha1stream.constants import BLOCK_SIZE, INITIAL_STATE, State


@dataclass
class SHA1Context:
    state: State = INITIAL_STATE
    pending: bytearray = field(default_factory=lambda: bytearray(BLOCK_SIZE))
    pending_len: int = 0
    total_bits: int = 0
    finalized: bool = False

    @property
    def buffered(self) -> bytes:
        """Bytes waiting in ``pending`` for the next block transform."""
        return bytes(self.pending[: self.pending_len])

    def copy(self) -> "SHA1Context":
        return SHA1Context(
            state=self.state,
            pending=bytearray(self.pending),
            pending_len=self.pending_len,
            total_bits=self.total_bits,
            finalized=self.finalized,
        )


def init() -> SHA1Context:
    return SHA1Context()
