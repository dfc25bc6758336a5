"""
DSL Validation Tests

Tests Node and Page validation and the structure of reported violations.
"""

import pytest

from cms_sdk.exceptions import ErrorCode, ValidationError
from cms_sdk.validation import Node, Page, validate_node, validate_page


def make_page(**overrides):
    page = {
        "version": "1.0.0",
        "meta": {"slug": "home", "title": "Home"},
        "root": {"type": "TextBlock", "params": {"text": "hi"}},
    }
    page.update(overrides)
    return page


class TestNodeValidation:
    """Test validate_node"""

    def test_minimal_node(self):
        node = validate_node({"type": "Container", "params": {}})
        assert isinstance(node, Node)
        assert node.children is None

    def test_node_with_key_and_children(self):
        node = validate_node(
            {
                "type": "Container",
                "key": "root",
                "params": {},
                "children": [{"type": "TextBlock", "params": {"text": "x"}}],
            }
        )
        assert node.key == "root"
        assert node.children[0].type == "TextBlock"

    def test_missing_params(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_node({"type": "Container"})
        exc = exc_info.value
        assert exc.error_code == ErrorCode.DSL_INVALID_NODE
        assert exc.status_code == 400
        assert {"path": "/params", "type": "missing"}.items() <= exc.details[0].items()

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_node({"type": "Container", "params": {}, "style": "x"})
        assert exc_info.value.details[0]["type"] == "extra_forbidden"
        assert exc_info.value.details[0]["path"] == "/style"

    def test_empty_type_rejected(self):
        with pytest.raises(ValidationError):
            validate_node({"type": "", "params": {}})

    def test_non_string_type_rejected(self):
        with pytest.raises(ValidationError):
            validate_node({"type": 5, "params": {}})

    def test_params_must_be_object(self):
        with pytest.raises(ValidationError):
            validate_node({"type": "Container", "params": []})

    def test_null_children_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_node({"type": "Container", "params": {}, "children": None})
        assert exc_info.value.details[0]["path"] == "/children"

    def test_null_key_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_node({"type": "Container", "params": {}, "key": None})
        assert exc_info.value.details[0]["path"] == "/key"

    def test_key_is_optional(self):
        assert validate_node({"type": "Container", "params": {}}).key is None

    def test_nested_violation_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_node({"type": "Container", "params": {}, "children": [{"type": "TextBlock"}]})
        assert exc_info.value.details[0]["path"] == "/children/0/params"

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            validate_node("Container")


class TestPageValidation:
    """Test validate_page"""

    def test_valid_page(self):
        page = validate_page(make_page())
        assert isinstance(page, Page)
        assert page.meta.slug == "home"

    def test_meta_allows_extra_keys(self):
        page = validate_page(make_page(meta={"slug": "home", "ab": "A"}))
        assert page.meta.model_extra == {"ab": "A"}

    @pytest.mark.parametrize("version", ["1", "2", "1.0", "1.0.0", "10.20.30", "0.1.0"])
    def test_valid_versions(self, version):
        validate_page(make_page(version=version))

    @pytest.mark.parametrize("version", ["", "1.0.0.0", "01.0", "v1", "1.x", "1."])
    def test_invalid_versions(self, version):
        with pytest.raises(ValidationError) as exc_info:
            validate_page(make_page(version=version))
        assert exc_info.value.error_code == ErrorCode.DSL_INVALID_PAGE

    def test_missing_meta(self):
        page = make_page()
        del page["meta"]
        with pytest.raises(ValidationError) as exc_info:
            validate_page(page)
        assert exc_info.value.details[0]["path"] == "/meta"

    @pytest.mark.parametrize("field", ["slug", "title", "locale"])
    def test_null_meta_string_rejected(self, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_page(make_page(meta={"slug": "home", field: None}))
        assert exc_info.value.details[0]["path"] == f"/meta/{field}"

    def test_meta_strings_are_optional(self):
        page = validate_page(make_page(meta={}))
        assert page.meta.slug is None
        assert page.meta.locale is None

    def test_unknown_top_level_key(self):
        with pytest.raises(ValidationError):
            validate_page(make_page(extra=True))

    def test_null_root_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_page(make_page(root=None))
        assert exc_info.value.error_code == ErrorCode.DSL_INVALID_PAGE

    def test_invalid_root_reports_page_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_page(make_page(root={"type": "TextBlock"}))
        assert exc_info.value.error_code == ErrorCode.DSL_INVALID_PAGE
        assert exc_info.value.details[0]["path"] == "/root/params"

    def test_validation_does_not_check_plugin_params(self):
        # params are opaque to the DSL; plugin schemas are checked at render time
        validate_page(make_page(root={"type": "TextBlock", "params": {}}))
