"""Python-facing SHA3-256 hasher built on the compiled sponge kernels.

``HashContext`` owns one context array and the domain separation suffix
chosen for it. The module-level ``init`` / ``update_byte`` / ``update_u32le``
/ ``finalize`` functions are the byte-at-a-time interface; ``update``,
``digest`` and ``hexdigest`` give the usual hashlib shape on top.
"""
import logging
import operator
from typing import Optional

import numpy as np

from . import sponge
from .constants import DIGEST_BYTES, RATE_BYTES, STATE_LANES, Suffix

logger = logging.getLogger(__name__)

_U32_MAX = 0xFFFFFFFF


class ContextFinalizedError(RuntimeError):
    """Raised when a finalized context is fed or finalized again."""


class HashContext:
    """State of a single SHA3-256 computation.

    Never share an instance between concurrent hash computations; create one
    per message instead.
    """
    digest_size = DIGEST_BYTES
    block_size = RATE_BYTES

    def __init__(self, suffix: Suffix = Suffix.SHA3):
        self.suffix = Suffix(suffix)
        self.words = sponge.new_context()
        self._digest: Optional[bytes] = None
        logger.debug("Created %s context", self.suffix.name)

    @property
    def name(self) -> str:
        return "sha3_256" if self.suffix is Suffix.SHA3 else "keccak_256"

    @property
    def state(self) -> np.ndarray:
        return self.words[:STATE_LANES]

    @property
    def pending(self) -> int:
        return int(self.words[sponge.PENDING])

    @property
    def byte_index(self) -> int:
        return int(self.words[sponge.BYTE_INDEX])

    @property
    def lane_index(self) -> int:
        return int(self.words[sponge.LANE_INDEX])

    @property
    def permutations(self) -> int:
        """Number of Keccak-f calls made so far for this context."""
        return int(self.words[sponge.PERMUTATIONS])

    @property
    def finalized(self) -> bool:
        return self._digest is not None

    def reset(self):
        sponge.reset(self.words)
        self._digest = None
        logger.debug("Reset %s context", self.suffix.name)

    def _check_open(self, operation: str):
        if self._digest is not None:
            logger.error("%s called on a finalized context", operation)
            raise ContextFinalizedError(
                f"cannot {operation} a finalized context; call reset() first")

    def update_byte(self, byte: int):
        self._check_open("update")
        value = operator.index(byte)
        if not 0 <= value <= 0xFF:
            logger.error("Byte value out of range: %r", byte)
            raise ValueError("byte must be in range(0, 256)")
        sponge.absorb_byte(self.words, value)

    def update_u32le(self, word: int):
        self._check_open("update")
        value = operator.index(word)
        if not 0 <= value <= _U32_MAX:
            logger.error("Word value out of range: %r", word)
            raise ValueError("word must be in range(0, 2**32)")
        sponge.absorb_u32le(self.words, value)

    def update(self, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            logger.error("Unsupported data type: %s", type(data).__name__)
            raise TypeError("data must be a bytes-like object")
        self._check_open("update")
        sponge.absorb_bytes(self.words, np.frombuffer(data, dtype=np.uint8))

    def finalize(self) -> bytes:
        """Pad, permute and return the 32-byte digest. Consumes the context."""
        self._check_open("finalize")
        out = np.zeros(DIGEST_BYTES, dtype=np.uint8)
        sponge.finalize_into(self.words, int(self.suffix), out)
        self._digest = out.tobytes()
        logger.debug("Finalized %s context after %d permutations",
                     self.suffix.name, self.permutations)
        return self._digest

    def digest(self) -> bytes:
        if self._digest is None:
            return self.finalize()
        return self._digest

    def hexdigest(self) -> str:
        return self.digest().hex()


def init(suffix: Suffix = Suffix.SHA3) -> HashContext:
    return HashContext(suffix)


def update_byte(ctx: HashContext, byte: int):
    ctx.update_byte(byte)


def update_u32le(ctx: HashContext, word: int):
    ctx.update_u32le(word)


def finalize(ctx: HashContext) -> bytes:
    return ctx.finalize()


def sha3_256(data: bytes = b"") -> bytes:
    ctx = HashContext(Suffix.SHA3)
    ctx.update(data)
    return ctx.finalize()


def keccak_256(data: bytes = b"") -> bytes:
    """Keccak-256 as submitted to the SHA-3 competition (0x01 padding)."""
    ctx = HashContext(Suffix.KECCAK)
    ctx.update(data)
    return ctx.finalize()
