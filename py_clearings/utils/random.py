"""
Random source helpers.

Generation code never touches Python's ``random`` module or a shared global
generator. Callers build one source per generation call with
:func:`create_prng` and pass it down explicitly.
"""

import uuid
from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Sequence, TypeVar

if TYPE_CHECKING:
    from ..core.alea_prng import AleaPRNG

T = TypeVar("T")


class RandomSource(Protocol):
    """Sampling capability consumed by the name generator and path solver."""

    def random(self) -> float: ...

    def randint(self, low: int, high: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, seq: Sequence[T]) -> List[T]: ...


def new_seed() -> str:
    """Short random seed string suitable for display and replay."""
    return str(uuid.uuid4())[:8]


def create_prng(seed: Optional[Any] = None) -> "AleaPRNG":
    """
    Create an independent Alea PRNG.

    Args:
        seed: Seed string or number. A fresh one is drawn when omitted.

    Returns:
        AleaPRNG instance; the seed it was built from is ``prng.seed``
    """
    from ..core.alea_prng import AleaPRNG

    if seed is None:
        seed = new_seed()
    return AleaPRNG(seed)
