"""
File-backed plugin definitions repository.

Reads ``{"<plugin id>": {"enabled": bool, ...}}`` from a JSON file. A
missing file means "no restriction" (None); an unreadable one is an error
the caller sees.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cms_sdk.repos.base import PluginsRepository

logger = logging.getLogger(__name__)


def _is_enabled(entry: Any) -> bool:
    # shorthand: {"TextBlock": true}
    if isinstance(entry, bool):
        return entry
    return bool((entry or {}).get("enabled", True))


class FilePluginsRepository(PluginsRepository):
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load_config(self) -> dict[str, dict[str, Any]] | None:
        if not self.path.exists():
            return None
        return json.loads(self.path.read_text(encoding="utf-8"))

    def save_config(self, config: dict[str, dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8")

    async def list_active_plugin_ids(self) -> list[str] | None:
        config = self.load_config()
        if config is None:
            logger.warning("No plugin config at %s; allowlist unrestricted", self.path)
            return None
        return [plugin_id for plugin_id, entry in config.items() if _is_enabled(entry)]
