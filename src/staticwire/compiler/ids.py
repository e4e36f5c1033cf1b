"""Per-node identifiers correlating markup elements with update code."""

import random
import string
from typing import Optional

from staticwire.core.nodes import Node
from staticwire.helpers.case import dash_case

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


class IdAllocator:
    """Allocates `<dash-cased-tag>-<base36>` identifiers.

    By default the suffix is random and only practically unique. With
    deterministic=True a monotonic counter is used instead, which makes the
    compiled output reproducible.
    """

    SUFFIX_BITS = 32

    def __init__(self, deterministic: bool = False, rng: Optional[random.Random] = None):
        self.deterministic = deterministic
        self._rng = rng or random.Random()
        self._counter = 0

    def allocate(self, node: Node) -> str:
        return f"{dash_case(node.name) or 'node'}-{self._next_suffix()}"

    def _next_suffix(self) -> str:
        if self.deterministic:
            self._counter += 1
            return to_base36(self._counter)
        return to_base36(self._rng.getrandbits(self.SUFFIX_BITS))
