"""
Tests for the exception hierarchy and error response helpers
"""

import json

from cms_sdk.exception_handlers import create_error_response, get_error_type
from cms_sdk.exceptions import (
    CircularDependencyError,
    CMSError,
    ErrorCode,
    MiddlewareError,
    PageNotFoundError,
    PluginBadReturnError,
    PluginMissingError,
    PluginNotAllowedError,
    PluginRegistryError,
    RenderError,
    ResolutionError,
    ServiceNotRegisteredError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Every error derives from CMSError and carries a kind"""

    def test_all_derive_from_cms_error(self):
        for error in (
            ValidationError("x"),
            PluginRegistryError("x"),
            PluginNotAllowedError("T"),
            ServiceNotRegisteredError("svc"),
            MiddlewareError("x"),
            PageNotFoundError("home"),
        ):
            assert isinstance(error, CMSError)

    def test_kind_is_error_code_value(self):
        assert ValidationError("x").kind == "DSL_INVALID_NODE"
        assert PluginMissingError("T").kind == "RENDER_PLUGIN_MISSING"

    def test_render_errors(self):
        for error in (PluginNotAllowedError("T"), PluginMissingError("T"), PluginBadReturnError("T", 1)):
            assert isinstance(error, RenderError)
            assert error.status_code == 400
            assert error.plugin_type == "T"
            assert error.details["type"] == "T"

    def test_resolution_errors(self):
        assert isinstance(ServiceNotRegisteredError("svc"), ResolutionError)
        error = CircularDependencyError("a", ["a", "b", "a"])
        assert isinstance(error, ResolutionError)
        assert error.error_code == ErrorCode.CIRCULAR_DEPENDENCY
        assert error.details == {"service": "a", "chain": ["a", "b", "a"]}

    def test_validation_error_details_default(self):
        error = ValidationError("Invalid page", error_code=ErrorCode.DSL_INVALID_PAGE)
        assert error.details == []
        assert error.status_code == 400

    def test_page_not_found(self):
        error = PageNotFoundError("home")
        assert error.status_code == 404
        assert error.details == {"slug": "home"}

    def test_message_is_str(self):
        assert str(MiddlewareError("bad stack")) == "bad stack"


class TestErrorResponse:
    """Test create_error_response"""

    def test_envelope(self):
        response = create_error_response(400, "Invalid", ErrorCode.DSL_INVALID_NODE, None, "/v1/render")
        body = json.loads(response.body)
        assert response.status_code == 400
        assert body == {
            "error": {
                "status_code": 400,
                "message": "Invalid",
                "type": "Bad Request",
                "error_code": "DSL_INVALID_NODE",
                "path": "/v1/render",
            }
        }

    def test_details_included_when_present(self):
        response = create_error_response(404, "Page not found", "RESOURCE_NOT_FOUND", {"slug": "x"})
        body = json.loads(response.body)
        assert body["error"]["details"] == {"slug": "x"}
        assert body["error"]["error_code"] == "RESOURCE_NOT_FOUND"

    def test_error_types(self):
        assert get_error_type(404) == "Not Found"
        assert get_error_type(418) == "Error"
