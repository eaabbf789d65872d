import hashlib
import logging

import pytest

from sha3pow import ContextFinalizedError, HashContext, Suffix, init, sha3_256


def test_finalize_twice_raises():
    ctx = init()
    ctx.finalize()
    with pytest.raises(ContextFinalizedError):
        ctx.finalize()


def test_update_after_finalize_raises():
    ctx = init()
    ctx.finalize()
    with pytest.raises(ContextFinalizedError):
        ctx.update_byte(0)
    with pytest.raises(ContextFinalizedError):
        ctx.update_u32le(0)
    with pytest.raises(ContextFinalizedError):
        ctx.update(b"x")


def test_digest_is_repeatable():
    ctx = init()
    ctx.update(b"abc")
    assert ctx.digest() == ctx.digest() == hashlib.sha3_256(b"abc").digest()
    assert ctx.finalized


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_byte_out_of_range(value):
    with pytest.raises(ValueError):
        init().update_byte(value)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_word_out_of_range(value):
    with pytest.raises(ValueError):
        init().update_u32le(value)


def test_non_integer_byte():
    with pytest.raises(TypeError):
        init().update_byte(1.5)


def test_update_rejects_str():
    with pytest.raises(TypeError):
        init().update("abc")


def test_word_boundaries():
    ctx = init()
    ctx.update_u32le(0)
    ctx.update_u32le(0xFFFFFFFF)
    expected = hashlib.sha3_256(b"\x00" * 4 + b"\xff" * 4).digest()
    assert ctx.finalize() == expected


def test_accepts_bytearray_and_memoryview():
    data = bytes(range(200))
    assert sha3_256(bytearray(data)) == hashlib.sha3_256(data).digest()
    assert sha3_256(memoryview(data)) == hashlib.sha3_256(data).digest()


def test_metadata():
    ctx = HashContext()
    assert ctx.digest_size == 32
    assert ctx.block_size == 136
    assert ctx.name == "sha3_256"
    assert HashContext(Suffix.KECCAK).name == "keccak_256"


def test_misuse_is_logged(caplog):
    ctx = init()
    ctx.finalize()
    with caplog.at_level(logging.ERROR, logger="sha3pow.hasher"):
        with pytest.raises(ContextFinalizedError):
            ctx.finalize()
    assert "finalized context" in caplog.text
