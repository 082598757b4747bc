import hashlib
import io

import pytest

from sha1stream.hasher import SHA1, hash_file, hash_stream, sha1, sha1_hex, sha1_text


def test_attributes():
    hasher = SHA1()
    assert hasher.name == "sha1"
    assert hasher.block_size == 64
    assert hasher.digest_size == 20


def test_update_is_chainable():
    assert SHA1().update(b"ab").update(b"c").hexdigest() == hashlib.sha1(b"abc").hexdigest()


def test_digest_does_not_consume_hasher():
    hasher = SHA1(b"hello ")
    assert hasher.digest() == hashlib.sha1(b"hello ").digest()
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha1(b"hello world").digest()
    assert hasher.digest() == hasher.digest()


def test_copy_diverges_from_original():
    original = SHA1(b"prefix")
    clone = original.copy()
    clone.update(b"-suffix")
    assert original.hexdigest() == hashlib.sha1(b"prefix").hexdigest()
    assert clone.hexdigest() == hashlib.sha1(b"prefix-suffix").hexdigest()


def test_module_helpers():
    data = b"a" * 1000
    assert sha1(data) == hashlib.sha1(data).digest()
    assert sha1_hex(data) == hashlib.sha1(data).hexdigest()
    assert SHA1.hash(data) == sha1(data)
    assert SHA1.hexdigest_from(data) == sha1_hex(data)


def test_sha1_text_encodes_utf8():
    text = "Привет, мир"
    assert sha1_text(text) == hashlib.sha1(text.encode("utf-8")).hexdigest()
    assert sha1_text(text, "utf-16") == hashlib.sha1(text.encode("utf-16")).hexdigest()


@pytest.mark.parametrize("chunk_size", [1, 7, 64, 8192])
def test_hash_stream(chunk_size):
    data = bytes(range(256)) * 5
    assert hash_stream(io.BytesIO(data), chunk_size).digest() == hashlib.sha1(data).digest()


def test_hash_stream_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        hash_stream(io.BytesIO(b""), 0)


def test_hash_file_writes_output(tmp_path):
    source = tmp_path / "input.bin"
    source.write_bytes(b"x" * 5000)
    target = tmp_path / "digest.txt"
    expected = hashlib.sha1(b"x" * 5000).hexdigest()

    assert hash_file(str(source), str(target), chunk_size=100) == expected
    assert target.read_text(encoding="utf-8") == expected + "\n"


def test_hash_file_without_output(tmp_path):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")
    assert hash_file(str(source)) == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
