from __future__ import annotations

import hashlib
from typing import List, Optional


class RngManager:
    """Derives every seed of a run from one root seed.

    A child seed depends only on the root and its name, never on how many
    seeds were drawn before it, so repeat ``r`` gets the same fold assignment
    whether it runs first, last or on its own::

        rngm = RngManager(42)
        rngm.child_seed("model")            # estimator random_state
        rngm.child_seed("repeat/3/split")   # partition of the fourth repeat
    """

    def __init__(self, seed: Optional[int]):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    @property
    def root(self) -> int:
        return self._root

    def child_seed(self, name: str) -> int:
        digest = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # uint32: accepted by numpy and as sklearn random_state
        return int.from_bytes(digest[:4], "little", signed=False)

    def repeat_seeds(self, n: int, base_name: str = "repeat") -> List[int]:
        """Partition seeds of ``n`` repeats, named ``{base_name}/{i}/split``."""
        return [self.child_seed(f"{base_name}/{i}/split") for i in range(int(n))]
