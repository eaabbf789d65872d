"""Sponge kernels for SHA3-256 working on a flat uint64 context array.

The whole per-hash state lives in one ``uint64[CONTEXT_WORDS]`` array so a
context can be created, fed and finalized from inside other compiled code
(one array per parallel lane) without touching Python objects:

    words 0..24  Keccak state, lane ``5*y + x``
    word  25     pending lane, buffered bytes little-endian
    word  26     number of buffered bytes (0..7)
    word  27     next rate lane to XOR into (0..16)
    word  28     Keccak-f calls made for this context

Absorbing after ``finalize_into`` or finalizing twice is undefined; reset the
context first.
"""
import numba
import numpy as np

from .constants import DIGEST_BYTES, RATE_LANES, STATE_LANES
from .keccak import keccak_f1600


PENDING = STATE_LANES
BYTE_INDEX = STATE_LANES + 1
LANE_INDEX = STATE_LANES + 2
PERMUTATIONS = STATE_LANES + 3
CONTEXT_WORDS = STATE_LANES + 4

_ZERO = np.uint64(0)
_ONE = np.uint64(1)
_EIGHT = np.uint64(8)
_BYTE = np.uint64(0xFF)
_RATE = np.uint64(RATE_LANES)
_LAST_RATE_BIT = np.uint64(0x8000000000000000)


@numba.jit(nopython=True)
def new_context():
    return np.zeros(CONTEXT_WORDS, dtype=np.uint64)


@numba.jit(nopython=True)
def reset(ctx):
    for i in range(CONTEXT_WORDS):
        ctx[i] = _ZERO


@numba.jit(nopython=True)
def _permute(ctx):
    keccak_f1600(ctx[:STATE_LANES])
    ctx[PERMUTATIONS] += _ONE


@numba.jit(nopython=True)
def absorb_byte(ctx, byte):
    ctx[PENDING] |= (np.uint64(byte) & _BYTE) << (ctx[BYTE_INDEX] * _EIGHT)
    ctx[BYTE_INDEX] += _ONE
    if ctx[BYTE_INDEX] == _EIGHT:
        lane = ctx[LANE_INDEX]
        ctx[lane] ^= ctx[PENDING]
        ctx[PENDING] = _ZERO
        ctx[BYTE_INDEX] = _ZERO
        lane += _ONE
        if lane == _RATE:
            lane = _ZERO
            _permute(ctx)
        ctx[LANE_INDEX] = lane


@numba.jit(nopython=True)
def absorb_u32le(ctx, word):
    for i in range(4):
        absorb_byte(ctx, (word >> (8 * i)) & 0xFF)


@numba.jit(nopython=True)
def absorb_bytes(ctx, data):
    for i in range(data.shape[0]):
        absorb_byte(ctx, data[i])


@numba.jit(nopython=True)
def finalize_into(ctx, suffix, digest):
    """Pad, run the last permutation and write 32 digest bytes into ``digest``.

    ``suffix`` is the domain separation byte (0x06 for SHA-3, 0x01 for the
    original Keccak submission).
    """
    pad = np.uint64(suffix) << (ctx[BYTE_INDEX] * _EIGHT)
    lane = ctx[LANE_INDEX]
    ctx[lane] ^= ctx[PENDING] ^ pad
    ctx[RATE_LANES - 1] ^= _LAST_RATE_BIT
    _permute(ctx)
    for i in range(DIGEST_BYTES):
        digest[i] = np.uint8((ctx[i >> 3] >> np.uint64(8 * (i & 7))) & _BYTE)
