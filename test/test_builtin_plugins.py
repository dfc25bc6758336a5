"""
Built-in Plugin Tests

Exact markup produced by Container, TextBlock, Image and List.
"""

import asyncio

import pytest

from cms_sdk.exceptions import PluginRegistryError
from cms_sdk.plugins.builtins.list import item_to_string


def render(renderer, node):
    return asyncio.run(renderer.render(node))


class TestContainerPlugin:
    def test_default_div(self, renderer):
        assert render(renderer, {"type": "Container", "params": {}}) == "<div></div>"

    def test_tag_and_class(self, renderer):
        node = {"type": "Container", "params": {"tag": "main", "class": 'a"b'}}
        assert render(renderer, node) == '<main class="a&quot;b"></main>'

    def test_disallowed_tag(self, renderer):
        with pytest.raises(PluginRegistryError):
            render(renderer, {"type": "Container", "params": {"tag": "script"}})


class TestTextBlockPlugin:
    def test_escapes_all_special_characters(self, renderer):
        node = {"type": "TextBlock", "params": {"text": "<hi>&\"'"}}
        assert render(renderer, node) == "<p>&lt;hi&gt;&amp;&quot;&#39;</p>"

    def test_class(self, renderer):
        node = {"type": "TextBlock", "params": {"text": "Hello", "class": "lead"}}
        assert render(renderer, node) == '<p class="lead">Hello</p>'

    def test_heading_tag(self, renderer):
        node = {"type": "TextBlock", "params": {"text": "Title", "tag": "h2"}}
        assert render(renderer, node) == "<h2>Title</h2>"

    def test_text_is_required(self, renderer):
        with pytest.raises(PluginRegistryError):
            render(renderer, {"type": "TextBlock", "params": {"tag": "h1"}})


class TestImagePlugin:
    def test_all_attributes_in_order(self, renderer):
        node = {
            "type": "Image",
            "params": {"src": "x.png", "alt": "a<b>", "width": 100, "height": 50.0, "class": "rounded"},
        }
        assert render(renderer, node) == (
            '<img src="x.png" alt="a&lt;b&gt;" width="100" height="50" class="rounded" />'
        )

    def test_src_only(self, renderer):
        assert render(renderer, {"type": "Image", "params": {"src": "x.png"}}) == '<img src="x.png" />'

    def test_fractional_dimension(self, renderer):
        node = {"type": "Image", "params": {"src": "x.png", "width": 12.5}}
        assert render(renderer, node) == '<img src="x.png" width="12.5" />'

    def test_src_escaped(self, renderer):
        node = {"type": "Image", "params": {"src": 'x.png" onerror="alert(1)'}}
        assert render(renderer, node) == '<img src="x.png&quot; onerror=&quot;alert(1)" />'

    def test_empty_src_rejected(self, renderer):
        with pytest.raises(PluginRegistryError):
            render(renderer, {"type": "Image", "params": {"src": ""}})


class TestListPlugin:
    def test_unordered(self, renderer):
        node = {"type": "List", "params": {"items": ["A", "B"]}}
        assert render(renderer, node) == "<ul><li>A</li><li>B</li></ul>"

    def test_ordered_with_classes_and_item_key(self, renderer):
        node = {
            "type": "List",
            "params": {
                "items": [{"label": "Alfa"}, {"label": "Beta"}],
                "ordered": True,
                "class": "nums",
                "itemClass": "item",
                "itemKey": "label",
            },
        }
        assert render(renderer, node) == (
            '<ol class="nums"><li class="item">Alfa</li><li class="item">Beta</li></ol>'
        )

    def test_items_escaped(self, renderer):
        node = {"type": "List", "params": {"items": ["<x>"]}}
        assert render(renderer, node) == "<ul><li>&lt;x&gt;</li></ul>"

    def test_empty_list(self, renderer):
        assert render(renderer, {"type": "List", "params": {"items": []}}) == "<ul></ul>"

    def test_items_required(self, renderer):
        with pytest.raises(PluginRegistryError):
            render(renderer, {"type": "List", "params": {}})


class TestItemToString:
    @pytest.mark.parametrize(
        ("item", "expected"),
        [
            ("a", "a"),
            (3, "3"),
            (2.0, "2"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (None, ""),
        ],
    )
    def test_primitives(self, item, expected):
        assert item_to_string(item) == expected

    def test_mapping_without_key_is_compact_json(self):
        assert item_to_string({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_mapping_missing_key_falls_back_to_json(self):
        assert item_to_string({"a": 1}, "label") == '{"a":1}'
