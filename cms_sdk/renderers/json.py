"""
JSON Renderer

Echoes a (possibly middleware-transformed) tree back as data. It never
consults the allowlist and never invokes plugins.
"""

from __future__ import annotations

import copy
from typing import Any


class JSONRenderer:
    async def render(self, tree: Any, context: Any = None) -> Any:
        # deep copy so callers cannot mutate the source tree through the echo
        return copy.deepcopy(tree)
