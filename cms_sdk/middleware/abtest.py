"""
A/B Bucket Middleware

Assigns ctx.ab = {"bucket", "buckets"} by hashing the caller's identity with
a salt. Identity priority: ctx.user_id, request user id, ``x-user-id``
header, ``abid`` cookie, then the literal "anon". The assignment is a pure
function of (identity, salt, buckets): nothing is stored.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cms_sdk.middleware.context import Middleware, Next, PipelineContext

DEFAULT_BUCKETS = ("A", "B")
DEFAULT_SALT = "cms-ab"


def hash_to_int(value: str, modulo: int) -> int:
    """First 4 bytes of SHA-1(value) as a big-endian uint32, mod ``modulo``."""
    digest = hashlib.sha1(str(value).encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big") % modulo


def resolve_identity(ctx: PipelineContext, source: str = "user-id") -> str:
    identity = None
    if source == "user-id":
        identity = ctx.user_id or ctx.request.user_id
    if not identity:
        identity = ctx.request.header("x-user-id") or ctx.request.cookies.get("abid")
    return str(identity) if identity else "anon"


def assign_bucket(identity: str, salt: str = DEFAULT_SALT, buckets: Sequence[str] = DEFAULT_BUCKETS) -> str:
    labels = list(buckets) or list(DEFAULT_BUCKETS)
    return labels[hash_to_int(f"{identity}:{salt}", len(labels))]


def ab_bucket(
    buckets: Sequence[str] | None = None,
    salt: str = DEFAULT_SALT,
    source: str = "user-id",
) -> Middleware:
    labels = list(buckets) if buckets else list(DEFAULT_BUCKETS)

    async def ab_middleware(ctx: PipelineContext, next: Next) -> None:
        identity = resolve_identity(ctx, source)
        ctx.ab = {"bucket": assign_bucket(identity, salt, labels), "buckets": list(labels)}
        await next()

    return ab_middleware
