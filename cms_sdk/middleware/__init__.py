"""
Composition middleware.

    compose            — ordered async chain-of-responsibility executor
    locale_resolver    — sets ctx.locale
    ab_bucket          — sets ctx.ab
    feature_flag_gate  — prunes ctx.tree
"""

from .abtest import ab_bucket, hash_to_int
from .compose import Pipeline, compose
from .context import PipelineContext, RequestInfo
from .flags import feature_flag_gate, prune_by_flag
from .locale import locale_resolver

__all__ = [
    "Pipeline",
    "PipelineContext",
    "RequestInfo",
    "ab_bucket",
    "compose",
    "feature_flag_gate",
    "hash_to_int",
    "locale_resolver",
    "prune_by_flag",
]
