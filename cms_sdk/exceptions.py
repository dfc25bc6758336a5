"""
Exception Classes for the CMS SDK

Every error raised by the composition engine derives from CMSError and
carries a machine-readable ErrorCode, an HTTP status hint and a structured
details payload. The error_code is the discriminant: hosts branch on it
instead of on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes, stable across releases."""

    # DSL validation
    DSL_INVALID_NODE = "DSL_INVALID_NODE"
    DSL_INVALID_PAGE = "DSL_INVALID_PAGE"

    # Plugin registry
    PLUGIN_INVALID = "PLUGIN_INVALID"
    PLUGIN_DUPLICATE = "PLUGIN_DUPLICATE"
    PLUGIN_NOT_REGISTERED = "PLUGIN_NOT_REGISTERED"
    PLUGIN_INVALID_PARAMS = "PLUGIN_INVALID_PARAMS"
    PLUGIN_INVALID_METADATA = "PLUGIN_INVALID_METADATA"
    ALLOWLIST_INVALID = "ALLOWLIST_INVALID"

    # Rendering
    RENDER_PLUGIN_NOT_ALLOWED = "RENDER_PLUGIN_NOT_ALLOWED"
    RENDER_PLUGIN_MISSING = "RENDER_PLUGIN_MISSING"
    RENDER_PLUGIN_BAD_RETURN = "RENDER_PLUGIN_BAD_RETURN"
    RENDER_FAILED = "RENDER_FAILED"

    # IoC container
    SERVICE_NOT_REGISTERED = "SERVICE_NOT_REGISTERED"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"

    # Pipeline
    MIDDLEWARE_INVALID = "MIDDLEWARE_INVALID"
    MIDDLEWARE_NEXT_REPEATED = "MIDDLEWARE_NEXT_REPEATED"

    # Hosts
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CMSError(Exception):
    """Base exception class for all CMS SDK exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details if details is not None else {}
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return self.error_code.value


# ============================================================================
# DSL Validation
# ============================================================================


class ValidationError(CMSError):
    """Raised when a Node or Page does not conform to the DSL.

    ``details`` is a list of ``{"path", "message", "type"}`` violations.
    """

    def __init__(
        self,
        message: str,
        details: list[dict[str, Any]] | None = None,
        error_code: ErrorCode = ErrorCode.DSL_INVALID_NODE,
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            details=details or [],
        )


# ============================================================================
# Plugin Registry
# ============================================================================


class PluginRegistryError(CMSError):
    """Raised on registry misconfiguration or plugin param violations"""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.PLUGIN_INVALID, details: Any = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            details=details,
        )


# ============================================================================
# Rendering
# ============================================================================


class RenderError(CMSError):
    """Base class for failures while walking a node tree"""

    def __init__(
        self,
        message: str,
        plugin_type: str | None = None,
        error_code: ErrorCode = ErrorCode.RENDER_FAILED,
    ):
        self.plugin_type = plugin_type
        details = {"type": plugin_type} if plugin_type is not None else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            details=details,
        )


class PluginNotAllowedError(RenderError):
    """Raised when a node names a plugin outside the allowlist"""

    def __init__(self, plugin_type: str):
        super().__init__(f"Plugin not allowed: {plugin_type}", plugin_type, ErrorCode.RENDER_PLUGIN_NOT_ALLOWED)


class PluginMissingError(RenderError):
    """Raised when no plugin (or no render callable) exists for a node type"""

    def __init__(self, plugin_type: str):
        super().__init__(
            f"Renderer plugin not found or invalid: {plugin_type}",
            plugin_type,
            ErrorCode.RENDER_PLUGIN_MISSING,
        )


class PluginBadReturnError(RenderError):
    """Raised when a plugin render call returns something other than str"""

    def __init__(self, plugin_type: str, returned: Any = None):
        super().__init__(
            f"Plugin render must return a string: {plugin_type}",
            plugin_type,
            ErrorCode.RENDER_PLUGIN_BAD_RETURN,
        )
        self.details["returned"] = type(returned).__name__


# ============================================================================
# IoC Container
# ============================================================================


class ResolutionError(CMSError):
    """Base class for dependency resolution failures"""

    def __init__(self, message: str, identifier: Any, error_code: ErrorCode):
        self.identifier = identifier
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            details={"service": str(identifier)},
        )


class ServiceNotRegisteredError(ResolutionError):
    """Raised when resolving an identifier nothing was registered under"""

    def __init__(self, identifier: Any):
        super().__init__(f"Service not registered: {identifier}", identifier, ErrorCode.SERVICE_NOT_REGISTERED)


class CircularDependencyError(ResolutionError):
    """Raised when resolution re-enters an identifier still under construction"""

    def __init__(self, identifier: Any, chain: list[Any] | None = None):
        super().__init__(f"Circular dependency detected: {identifier}", identifier, ErrorCode.CIRCULAR_DEPENDENCY)
        if chain:
            self.details["chain"] = [str(item) for item in chain]


# ============================================================================
# Middleware Pipeline
# ============================================================================


class MiddlewareError(CMSError):
    """Raised for a malformed middleware stack or a misused next()"""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.MIDDLEWARE_INVALID):
        super().__init__(message=message, error_code=error_code)


class PageNotFoundError(CMSError):
    """Raised by hosts when a page slug has no stored page"""

    def __init__(self, slug: str):
        super().__init__(
            message="Page not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
            details={"slug": slug},
        )
