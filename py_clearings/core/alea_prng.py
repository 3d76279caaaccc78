"""
Seedable Alea PRNG used for all clearing-map randomness.

Based on Johannes Baagøe's Alea algorithm. The sampling helpers mirror the
lodash primitives the map editor was built around (``random``, ``sample``
and ``shuffle``), so a seed always reproduces the same layout.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Alea generator with integer, choice and shuffle helpers.

    Every generation call should own its instance; nothing here is shared.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, both ends inclusive."""
        if low > high:
            raise ValueError(f"Empty range: {low} > {high}")
        return low + int(self.random() * (high - low + 1))

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Return a shuffled copy of ``seq`` (forward Fisher-Yates)."""
        result = list(seq)
        size = len(result)
        for index in range(size):
            swap = index + int(self.random() * (size - index))
            result[index], result[swap] = result[swap], result[index]
        return result
