from .locale import parse_accept_language, primary_tag

__all__ = ["parse_accept_language", "primary_tag"]
