"""
Plugin Registry Event Constants

Event names listeners can subscribe to with PluginRegistry.on().
Payloads are plain dicts; delivery is synchronous and best-effort.
"""

from __future__ import annotations

# payload: {"id": str}
EVENT_REGISTER = "register"

# payload: {"id": str}
EVENT_UNREGISTER = "unregister"

# payload: {"allowlist": list[str] | None}
EVENT_ALLOWLIST_CHANGED = "allowlistChanged"

ALL_EVENTS: list[str] = [
    EVENT_REGISTER,
    EVENT_UNREGISTER,
    EVENT_ALLOWLIST_CHANGED,
]
