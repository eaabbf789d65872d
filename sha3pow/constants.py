import enum

import numpy as np


RATE_LANES = 17
CAPACITY_LANES = 8
STATE_LANES = RATE_LANES + CAPACITY_LANES
RATE_BYTES = RATE_LANES * 8
DIGEST_BYTES = 32
ROUNDS = 24


class Suffix(enum.IntEnum):
    """Domain separation byte XORed in right after the message.

    Both values already carry the first bit of pad10*1 where the standard
    requires it.
    """
    SHA3 = 0x06
    KECCAK = 0x01


# rho rotation amounts, in the order lanes are visited by the fused rho/pi walk
ROTATION_OFFSETS = np.array([
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
], dtype=np.uint64)

# destination lane of each step of the rho/pi walk (starts from lane 1)
PI_LANE_INDEX = np.array([
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
], dtype=np.int64)

ROUND_CONSTANTS = np.array([
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A,
    0x8000000080008000, 0x000000000000808B, 0x0000000080000001,
    0x8000000080008081, 0x8000000000008009, 0x000000000000008A,
    0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089,
    0x8000000000008003, 0x8000000000008002, 0x8000000000000080,
    0x000000000000800A, 0x800000008000000A, 0x8000000080008081,
    0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
], dtype=np.uint64)
