from __future__ import annotations

import random as _rnd
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[_rnd.Random] = None) -> List[T]:
    """Fisher-Yates on a copy; `items` is left untouched."""
    rng = rng or _rnd
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out
