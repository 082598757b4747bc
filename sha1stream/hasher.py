from __future__ import annotations
from typing import BinaryIO, Optional

from sha1stream.constants import BLOCK_SIZE, DEFAULT_CHUNK_SIZE, DIGEST_SIZE
from sha1stream.context import SHA1Context, init
from sha1stream import engine
from sha1stream.engine import BufferLike


class SHA1:
	name: str = "sha1"
	block_size: int = BLOCK_SIZE
	digest_size: int = DIGEST_SIZE

	def __init__(self, data: BufferLike | None = None):
		self._ctx: SHA1Context = init()

		if data is not None:
			self.update(data)

	def update(self, data: BufferLike) -> "SHA1":
		engine.update(self._ctx, data)
		return self

	def digest(self) -> bytes:
		# finalize a snapshot so the hasher can keep absorbing data
		return engine.final(self._ctx.copy())

	def hexdigest(self) -> str:
		return self.digest().hex()

	def copy(self) -> "SHA1":
		clone = SHA1()
		clone._ctx = self._ctx.copy()
		return clone

	@classmethod
	def hash(cls, data: BufferLike) -> bytes:
		"""Return the SHA-1 digest for ``data`` as raw bytes."""
		return cls(data).digest()

	@classmethod
	def hexdigest_from(cls, data: BufferLike) -> str:
		"""Return the SHA-1 digest for ``data`` as a hex string."""
		return cls(data).hexdigest()


def sha1(data: BufferLike) -> bytes:
	return SHA1.hash(data)


def sha1_hex(data: BufferLike) -> str:
	return SHA1.hexdigest_from(data)


def sha1_text(text: str, encoding: str = "utf-8") -> str:
	return SHA1(text.encode(encoding)).hexdigest()


def hash_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> SHA1:
	if chunk_size <= 0:
		raise ValueError("chunk_size must be positive")
	hasher = SHA1()
	while True:
		chunk = stream.read(chunk_size)
		if not chunk:
			break
		hasher.update(chunk)
	return hasher


def hash_file(input_path: str, output_path: Optional[str] = None, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
	with open(input_path, "rb") as src:
		hex_digest = hash_stream(src, chunk_size).hexdigest()

	if output_path is not None:
		with open(output_path, "w", encoding="utf-8") as dst:
			dst.write(hex_digest)
			dst.write("\n")

	return hex_digest
