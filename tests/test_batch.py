import hashlib

import numpy as np
import pytest

from sha3pow import Suffix, keccak_256, sha3_256_batch


def test_sequence_of_messages():
    messages = [b"", b"abc", b"a" * 135, b"b" * 136, b"c" * 137, bytes(range(256))]
    out = sha3_256_batch(messages)
    assert out.shape == (len(messages), 32)
    for row, m in zip(out, messages):
        assert row.tobytes() == hashlib.sha3_256(m).digest()


def test_array_with_lengths():
    rng = np.random.default_rng(7)
    rows = rng.integers(0, 256, size=(16, 300), dtype=np.uint8)
    lengths = np.arange(0, 300, 300 // 16)[:16]
    out = sha3_256_batch(rows, lengths)
    for i in range(16):
        expected = hashlib.sha3_256(rows[i, :lengths[i]].tobytes()).digest()
        assert out[i].tobytes() == expected


def test_full_rows_by_default():
    rows = np.full((3, 8), 0x61, dtype=np.uint8)
    out = sha3_256_batch(rows)
    assert out[0].tobytes() == hashlib.sha3_256(b"a" * 8).digest()


def test_keccak_suffix():
    out = sha3_256_batch([b"", b"abc"], suffix=Suffix.KECCAK)
    assert out[1].tobytes() == keccak_256(b"abc")


def test_empty_batch():
    assert sha3_256_batch([]).shape == (0, 32)


def test_bad_lengths():
    rows = np.zeros((2, 4), dtype=np.uint8)
    with pytest.raises(ValueError):
        sha3_256_batch(rows, [1])
    with pytest.raises(ValueError):
        sha3_256_batch(rows, [1, 5])
    with pytest.raises(ValueError):
        sha3_256_batch(np.zeros(4, dtype=np.uint8))
    with pytest.raises(ValueError):
        sha3_256_batch([b"a"], lengths=[1])
