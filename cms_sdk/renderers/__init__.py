from .html import HTMLRenderer
from .json import JSONRenderer

__all__ = ["HTMLRenderer", "JSONRenderer"]
