from . import pages, render

__all__ = ["pages", "render"]
