from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from staticwire.compiler.ids import IdAllocator


@dataclass
class CompilationContext:
    """Accumulators shared by every node of one compilation.

    on_change_js_by_id maps a node identifier to the update code applied to
    its live element. Entries are created lazily and only ever appended to.
    js collects free-standing function declarations (event handlers).
    """

    ids: IdAllocator = field(default_factory=IdAllocator)
    on_change_js_by_id: Dict[str, str] = field(default_factory=dict)
    js: str = ""

    def add_on_change_js(self, el_id: str, code: str) -> None:
        if el_id not in self.on_change_js_by_id:
            self.on_change_js_by_id[el_id] = ""
        self.on_change_js_by_id[el_id] += code

    def add_js(self, code: str) -> None:
        self.js += code

    def update_blocks(self) -> Iterator[Tuple[str, str]]:
        """Yield (id, code) in insertion order, skipping empty entries."""
        for el_id, code in self.on_change_js_by_id.items():
            if code:
                yield el_id, code
