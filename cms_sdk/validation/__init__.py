from .schemas import Node, Page, PageMeta
from .validator import validate_node, validate_page

__all__ = ["Node", "Page", "PageMeta", "validate_node", "validate_page"]
