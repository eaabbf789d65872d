from .batch import sha3_256_batch
from .constants import (
    CAPACITY_LANES,
    DIGEST_BYTES,
    PI_LANE_INDEX,
    RATE_BYTES,
    RATE_LANES,
    ROTATION_OFFSETS,
    ROUND_CONSTANTS,
    ROUNDS,
    STATE_LANES,
    Suffix,
)
from .hasher import (
    ContextFinalizedError,
    HashContext,
    finalize,
    init,
    keccak_256,
    sha3_256,
    update_byte,
    update_u32le,
)
from .keccak import keccak_f1600

__version__ = "0.1.0"
