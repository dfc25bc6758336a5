"""
Plugin Registry

PluginRegistry holds render plugins by id, compiles their params schemas
once at registration, and owns the allowlist of ids a renderer may invoke.

The allowlist is an immutable frozenset swapped wholesale on every change,
so a render in flight sees either the old or the new set, never a mix.

Events are fire-and-forget: listeners run synchronously in subscription
order; exceptions are caught, logged, and never abort the triggering call.
"""

from __future__ import annotations

import dataclasses
import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import jsonschema
from jsonschema.exceptions import SchemaError

from cms_sdk.exceptions import ErrorCode, PluginRegistryError
from cms_sdk.plugins.base import PluginMetadata, as_plugin
from cms_sdk.plugins.events import EVENT_ALLOWLIST_CHANGED, EVENT_REGISTER, EVENT_UNREGISTER

if TYPE_CHECKING:
    from cms_sdk.repos.base import PluginsRepository

logger = logging.getLogger(__name__)

_METADATA_FIELDS = {f.name for f in dataclasses.fields(PluginMetadata)}


@dataclass
class Registration:
    type: str
    plugin: Any
    metadata: PluginMetadata
    registration_date: datetime


class PluginRegistry:
    """
    In-process registry for render plugins.

    Args:
        repo: Optional source of active plugin ids, any object exposing
              ``async list_active_plugin_ids() -> list[str] | None``.
    """

    def __init__(self, repo: PluginsRepository | None = None) -> None:
        self._registrations: dict[str, Registration] = {}
        self._validators: dict[str, Any] = {}
        self._repo = repo
        self._allowlist: frozenset[str] | None = None
        self._listeners: dict[str, list[Callable[[dict[str, Any]], Any]]] = defaultdict(list)

    # ── Events ────────────────────────────────────────────────────────────────

    def on(self, event: str, listener: Callable[[dict[str, Any]], Any]) -> None:
        self._listeners[event].append(listener)

    def off(self, event: str, listener: Callable[[dict[str, Any]], Any]) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def _emit(self, event: str, payload: dict[str, Any]) -> None:
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(payload)
            except Exception as exc:
                logger.warning("Registry listener for %s raised: %s", event, exc)

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, plugin: Any, metadata: PluginMetadata | Mapping[str, Any] | None = None) -> PluginRegistry:
        """Register a plugin under its id and compile its params schema."""
        plugin = as_plugin(plugin)
        plugin_id = getattr(plugin, "id", None)
        if not plugin_id or not isinstance(plugin_id, str):
            raise PluginRegistryError("Invalid plugin: missing id", ErrorCode.PLUGIN_INVALID)
        if plugin_id in self._registrations:
            raise PluginRegistryError(
                f"Plugin already registered: {plugin_id}",
                ErrorCode.PLUGIN_DUPLICATE,
                {"id": plugin_id},
            )

        resolved_metadata = self._resolve_metadata(plugin, metadata)
        schema = getattr(plugin, "schema", None)
        validator = self._compile(plugin_id, schema) if schema else None

        self._registrations[plugin_id] = Registration(
            type=plugin_id,
            plugin=plugin,
            metadata=resolved_metadata,
            registration_date=datetime.now(timezone.utc),
        )
        if validator is not None:
            self._validators[plugin_id] = validator

        logger.info("Plugin registered: %s v%s", plugin_id, resolved_metadata.version)
        self._emit(EVENT_REGISTER, {"id": plugin_id})
        return self

    def unregister(self, plugin_id: str) -> None:
        if plugin_id not in self._registrations:
            raise PluginRegistryError(
                f"Plugin not registered: {plugin_id}",
                ErrorCode.PLUGIN_NOT_REGISTERED,
                {"id": plugin_id},
            )
        del self._registrations[plugin_id]
        self._validators.pop(plugin_id, None)
        logger.info("Plugin unregistered: %s", plugin_id)
        self._emit(EVENT_UNREGISTER, {"id": plugin_id})

    @staticmethod
    def _compile(plugin_id: str, schema: Mapping[str, Any]) -> Any:
        try:
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            raise PluginRegistryError(
                f"Invalid params schema for plugin {plugin_id}: {exc.message}",
                ErrorCode.PLUGIN_INVALID,
                {"id": plugin_id},
            ) from exc
        return validator_cls(schema)

    @staticmethod
    def _resolve_metadata(plugin: Any, metadata: PluginMetadata | Mapping[str, Any] | None) -> PluginMetadata:
        if metadata is None:
            default = getattr(plugin, "meta", None)
            metadata = default if isinstance(default, PluginMetadata) else PluginMetadata(name=plugin.id)
        elif isinstance(metadata, Mapping):
            unknown = set(metadata) - _METADATA_FIELDS
            if unknown:
                raise PluginRegistryError(
                    f"Unknown plugin metadata fields: {', '.join(sorted(unknown))}",
                    ErrorCode.PLUGIN_INVALID_METADATA,
                )
            metadata = PluginMetadata(**{"name": plugin.id, **metadata})
        elif not isinstance(metadata, PluginMetadata):
            raise PluginRegistryError("Plugin metadata must be a mapping", ErrorCode.PLUGIN_INVALID_METADATA)

        if not metadata.name or not isinstance(metadata.name, str):
            raise PluginRegistryError("Plugin metadata must have a valid name", ErrorCode.PLUGIN_INVALID_METADATA)
        if not metadata.category or not isinstance(metadata.category, str):
            raise PluginRegistryError("Plugin metadata must have a valid category", ErrorCode.PLUGIN_INVALID_METADATA)
        if not isinstance(metadata.tags, list):
            raise PluginRegistryError("Plugin metadata tags must be a list", ErrorCode.PLUGIN_INVALID_METADATA)
        if not isinstance(metadata.configuration, Mapping):
            raise PluginRegistryError(
                "Plugin metadata must have a configuration mapping", ErrorCode.PLUGIN_INVALID_METADATA
            )
        return metadata

    # ── Lookup ────────────────────────────────────────────────────────────────

    def has(self, plugin_id: str) -> bool:
        return plugin_id in self._registrations

    def get(self, plugin_id: str) -> Any | None:
        """Return the plugin with the given id, or None if not registered."""
        registration = self._registrations.get(plugin_id)
        return registration.plugin if registration else None

    def get_registration(self, plugin_id: str) -> Registration | None:
        return self._registrations.get(plugin_id)

    def list(self) -> list[Any]:
        """Return all registered plugins in registration order."""
        return [registration.plugin for registration in self._registrations.values()]

    def types(self) -> list[str]:
        return list(self._registrations)

    def by_category(self, category: str) -> list[str]:
        return [
            plugin_id
            for plugin_id, registration in self._registrations.items()
            if registration.metadata.category == category
        ]

    def search(self, query: str) -> list[str]:
        """Case-insensitive match against metadata name, description and tags."""
        needle = query.lower()
        matches = []
        for plugin_id, registration in self._registrations.items():
            meta = registration.metadata
            haystack = [meta.name, meta.description or "", *meta.tags]
            if any(needle in str(value).lower() for value in haystack):
                matches.append(plugin_id)
        return matches

    # ── Allowlist ─────────────────────────────────────────────────────────────

    @property
    def allowlist(self) -> frozenset[str] | None:
        return self._allowlist

    def set_allowlist(self, ids: Iterable[str] | None) -> None:
        """Replace the allowlist. ``None`` lifts every restriction."""
        if ids is None:
            ordered = None
        elif isinstance(ids, (str, bytes, Mapping)) or not isinstance(ids, Iterable):
            raise PluginRegistryError("Allowlist must be a list of ids or None", ErrorCode.ALLOWLIST_INVALID)
        else:
            ordered = list(dict.fromkeys(ids))
            if not all(isinstance(plugin_id, str) for plugin_id in ordered):
                raise PluginRegistryError("Allowlist ids must be strings", ErrorCode.ALLOWLIST_INVALID)

        self._allowlist = frozenset(ordered) if ordered is not None else None
        logger.info("Plugin allowlist changed: %s", "unrestricted" if ordered is None else ordered)
        self._emit(EVENT_ALLOWLIST_CHANGED, {"allowlist": ordered})

    async def load_allowlist_from_repo(self) -> list[str] | None:
        """
        Replace the allowlist with the repository's active plugin ids.

        Returns the loaded ids (``None`` meaning unrestricted), or ``[]``
        without touching the allowlist when no repository is configured.
        Repository failures propagate; nothing is retried.
        """
        if self._repo is None or not callable(getattr(self._repo, "list_active_plugin_ids", None)):
            return []
        ids = await self._repo.list_active_plugin_ids()
        self.set_allowlist(ids)
        return ids

    def is_allowed(self, plugin_id: str) -> bool:
        allowlist = self._allowlist
        return allowlist is None or plugin_id in allowlist

    # ── Params validation ─────────────────────────────────────────────────────

    def validate_params(self, plugin_id: str, params: Any) -> bool:
        """Check ``params`` against the plugin's schema; no schema always passes."""
        validator = self._validators.get(plugin_id)
        if validator is None:
            return True
        errors = sorted(validator.iter_errors(params), key=lambda e: [str(p) for p in e.absolute_path])
        if errors:
            details = [
                {
                    "path": "".join(f"/{part}" for part in error.absolute_path),
                    "message": error.message,
                    "keyword": error.validator,
                }
                for error in errors
            ]
            raise PluginRegistryError(
                f"Invalid params for plugin {plugin_id}",
                ErrorCode.PLUGIN_INVALID_PARAMS,
                details,
            )
        return True
