"""
Output Escaping Utilities

Every text-producing plugin routes user-supplied values through escape_html
before interpolating them into markup.
"""

from typing import Any

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(value: Any) -> str:
    """
    Escape ``& < > " '`` in the string form of ``value``.

    Args:
        value: Any value; non-strings are converted with str()

    Returns:
        Escaped string safe for element content and quoted attributes
    """
    return str(value).translate(_HTML_ESCAPES)


def attribute(name: str, value: Any) -> str:
    """Render a single ``name="value"`` pair with the value escaped."""
    return f'{name}="{escape_html(value)}"'


def class_attribute(value: Any) -> str:
    """Return `` class="..."`` (leading space) or an empty string."""
    return f" {attribute('class', value)}" if value else ""
