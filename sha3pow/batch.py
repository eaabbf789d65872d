"""Hash many independent messages in one parallel numba loop."""
import logging

import numba
import numpy as np

from .constants import DIGEST_BYTES, Suffix
from .sponge import absorb_bytes, finalize_into, new_context

logger = logging.getLogger(__name__)


@numba.jit(nopython=True, parallel=True)
def _hash_rows(messages, lengths, suffix, out):
    for i in numba.prange(messages.shape[0]):
        # each iteration owns its context, nothing is shared between rows
        ctx = new_context()
        absorb_bytes(ctx, messages[i, :lengths[i]])
        finalize_into(ctx, suffix, out[i])


def _pack(messages):
    lengths = np.array([len(m) for m in messages], dtype=np.int64)
    width = int(lengths.max()) if len(messages) else 0
    rows = np.zeros((len(messages), width), dtype=np.uint8)
    for i, m in enumerate(messages):
        rows[i, :len(m)] = np.frombuffer(bytes(m), dtype=np.uint8)
    return rows, lengths


def sha3_256_batch(messages, lengths=None, suffix: Suffix = Suffix.SHA3) -> np.ndarray:
    """Return an ``(n, 32)`` uint8 array with one digest per message.

    ``messages`` is either a sequence of bytes-like objects or a 2-D uint8
    array whose row ``i`` holds ``lengths[i]`` message bytes (the rest of the
    row is ignored). Without ``lengths`` every full row is hashed.
    """
    suffix = Suffix(suffix)
    if isinstance(messages, np.ndarray):
        if messages.ndim != 2 or messages.dtype != np.uint8:
            logger.error("Bad message array: ndim=%d dtype=%s", messages.ndim, messages.dtype)
            raise ValueError("messages must be a 2-D uint8 array")
        rows = messages
        if lengths is None:
            lengths = np.full(rows.shape[0], rows.shape[1], dtype=np.int64)
        else:
            lengths = np.asarray(lengths, dtype=np.int64)
    else:
        if lengths is not None:
            logger.error("lengths given together with a sequence of messages")
            raise ValueError("lengths is only accepted with a 2-D message array")
        rows, lengths = _pack(list(messages))

    if lengths.shape != (rows.shape[0],):
        logger.error("Got %d lengths for %d messages", lengths.size, rows.shape[0])
        raise ValueError("lengths must hold one entry per message")
    if lengths.size and (lengths.min() < 0 or lengths.max() > rows.shape[1]):
        logger.error("Message lengths outside [0, %d]", rows.shape[1])
        raise ValueError("message lengths must fit inside their rows")

    out = np.zeros((rows.shape[0], DIGEST_BYTES), dtype=np.uint8)
    logger.debug("Hashing %d messages (longest %d bytes)", rows.shape[0],
                 int(lengths.max()) if lengths.size else 0)
    if rows.shape[0]:
        _hash_rows(np.ascontiguousarray(rows), lengths, int(suffix), out)
    return out
