"""
CMS SDK — plugin-based page composition and rendering.

    Container                 — IoC container (transient / singleton / scoped)
    PluginRegistry            — render plugins, allowlist, params validation
    validate_node/page        — DSL validation
    HTMLRenderer/JSONRenderer — tree renderers
    compose + middlewares     — locale, A/B bucket, feature-flag pruning
"""

from cms_sdk.container import Container, InstanceFactory, ServiceLifetime
from cms_sdk.exceptions import (
    CircularDependencyError,
    CMSError,
    ErrorCode,
    MiddlewareError,
    PluginBadReturnError,
    PluginMissingError,
    PluginNotAllowedError,
    PluginRegistryError,
    RenderError,
    ResolutionError,
    ServiceNotRegisteredError,
    ValidationError,
)
from cms_sdk.middleware import (
    PipelineContext,
    RequestInfo,
    ab_bucket,
    compose,
    feature_flag_gate,
    locale_resolver,
)
from cms_sdk.plugins import FunctionPlugin, Plugin, PluginMetadata, PluginRegistry, RenderArgs, register_builtins
from cms_sdk.renderers import HTMLRenderer, JSONRenderer
from cms_sdk.validation import validate_node, validate_page

__version__ = "1.0.0"

__all__ = [
    "CMSError",
    "CircularDependencyError",
    "Container",
    "ErrorCode",
    "FunctionPlugin",
    "HTMLRenderer",
    "InstanceFactory",
    "JSONRenderer",
    "MiddlewareError",
    "PipelineContext",
    "Plugin",
    "PluginBadReturnError",
    "PluginMetadata",
    "PluginMissingError",
    "PluginNotAllowedError",
    "PluginRegistry",
    "PluginRegistryError",
    "RenderArgs",
    "RenderError",
    "RequestInfo",
    "ResolutionError",
    "ServiceLifetime",
    "ServiceNotRegisteredError",
    "ValidationError",
    "ab_bucket",
    "compose",
    "feature_flag_gate",
    "locale_resolver",
    "register_builtins",
    "validate_node",
    "validate_page",
]
