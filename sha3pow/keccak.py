import numba
import numpy as np

from .constants import PI_LANE_INDEX, ROTATION_OFFSETS, ROUND_CONSTANTS, ROUNDS, STATE_LANES


_ONE = np.uint64(1)
_WIDTH = np.uint64(64)


# rotate left, 1 <= n <= 63
@numba.jit(nopython=True)
def rot64(a, n):
    return (a << n) | (a >> (_WIDTH - n))


@numba.jit(nopython=True)
def keccak_f1600(state):
    """Keccak-f[1600] applied in place to 25 uint64 lanes, state[5*y + x]."""
    for rnd in range(ROUNDS):
        # theta
        c0 = state[0] ^ state[5] ^ state[10] ^ state[15] ^ state[20]
        c1 = state[1] ^ state[6] ^ state[11] ^ state[16] ^ state[21]
        c2 = state[2] ^ state[7] ^ state[12] ^ state[17] ^ state[22]
        c3 = state[3] ^ state[8] ^ state[13] ^ state[18] ^ state[23]
        c4 = state[4] ^ state[9] ^ state[14] ^ state[19] ^ state[24]
        d0 = c4 ^ rot64(c1, _ONE)
        d1 = c0 ^ rot64(c2, _ONE)
        d2 = c1 ^ rot64(c3, _ONE)
        d3 = c2 ^ rot64(c4, _ONE)
        d4 = c3 ^ rot64(c0, _ONE)
        for y in range(0, STATE_LANES, 5):
            state[y] ^= d0
            state[y + 1] ^= d1
            state[y + 2] ^= d2
            state[y + 3] ^= d3
            state[y + 4] ^= d4

        # rho and pi, walking the lanes with one carried value
        t = state[1]
        for i in range(STATE_LANES - 1):
            j = PI_LANE_INDEX[i]
            nxt = state[j]
            state[j] = rot64(t, ROTATION_OFFSETS[i])
            t = nxt

        # chi
        for y in range(0, STATE_LANES, 5):
            a0 = state[y]
            a1 = state[y + 1]
            a2 = state[y + 2]
            a3 = state[y + 3]
            a4 = state[y + 4]
            state[y] = a0 ^ (~a1 & a2)
            state[y + 1] = a1 ^ (~a2 & a3)
            state[y + 2] = a2 ^ (~a3 & a4)
            state[y + 3] = a3 ^ (~a4 & a0)
            state[y + 4] = a4 ^ (~a0 & a1)

        # iota
        state[0] ^= ROUND_CONSTANTS[rnd]
