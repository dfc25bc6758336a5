"""
Plugin Base Classes

PluginMetadata: declarative metadata stored with each registration.
RenderArgs:     the single argument handed to Plugin.render().
Plugin:         abstract base class for render plugins.
FunctionPlugin: adapts a bare ``render`` callable (and optional schema).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cms_sdk.plugins.registry import PluginRegistry


@dataclass
class PluginMetadata:
    """
    Metadata describing a registered plugin.

    Attributes:
        name:          Human-readable name, defaults to the plugin id.
        category:      Grouping used by PluginRegistry.by_category().
        description:   Free text, searched by PluginRegistry.search().
        version:       Semver string, e.g. "1.0.0".
        author:        Plugin author (defaults to "CMS Core Team").
        tags:          Free-form labels, searched by PluginRegistry.search().
        configuration: Arbitrary plugin configuration.
    """

    name: str
    category: str = "general"
    description: str = ""
    version: str = "1.0.0"
    author: str = "CMS Core Team"
    tags: list[str] = field(default_factory=list)
    configuration: dict[str, Any] = field(default_factory=dict)


@dataclass
class RenderArgs:
    node: Mapping[str, Any]
    params: dict[str, Any]
    children: str
    context: Any
    registry: PluginRegistry


class Plugin(ABC):
    """
    Abstract base class for render plugins.

    Subclasses set ``id`` (the node ``type`` they render), optionally a JSON
    Schema in ``schema`` for their params, and implement ``render``. Render
    may be a coroutine function; it must produce a ``str``.
    """

    id: str = ""
    schema: dict[str, Any] | None = None

    @property
    def meta(self) -> PluginMetadata:
        """Default metadata used when none is passed at registration."""
        return PluginMetadata(name=self.id)

    @property
    def renderable(self) -> bool:
        return True

    @abstractmethod
    def render(self, args: RenderArgs) -> str | Awaitable[str]:
        ...


class FunctionPlugin(Plugin):
    """Plugin assembled from an id, a render callable and an optional schema."""

    def __init__(
        self,
        id: str,
        render: Callable[[RenderArgs], str | Awaitable[str]] | None = None,
        schema: dict[str, Any] | None = None,
        meta: PluginMetadata | None = None,
    ):
        self.id = id
        self.schema = schema
        self._render = render
        self._meta = meta

    @property
    def meta(self) -> PluginMetadata:
        return self._meta or PluginMetadata(name=self.id)

    @property
    def renderable(self) -> bool:
        return callable(self._render)

    def render(self, args: RenderArgs) -> str | Awaitable[str]:
        if self._render is None:
            raise TypeError(f"Plugin {self.id} has no render function")
        return self._render(args)


def as_plugin(candidate: Any) -> Any:
    """Normalise a mapping ``{"id", "render", "schema"}`` into a FunctionPlugin.

    Plugin instances and other duck-typed objects are returned unchanged.
    """
    if isinstance(candidate, Mapping):
        return FunctionPlugin(
            id=candidate.get("id"),
            render=candidate.get("render"),
            schema=candidate.get("schema"),
        )
    return candidate


def is_renderable(plugin: Any) -> bool:
    """True when ``plugin`` exposes a usable render callable."""
    if plugin is None:
        return False
    if isinstance(plugin, Plugin):
        return plugin.renderable
    return callable(getattr(plugin, "render", None))
