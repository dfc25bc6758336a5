"""
In-memory pages repository for development and tests.
"""

from __future__ import annotations

import copy
from typing import Any

from cms_sdk.repos.base import PagesRepository
from cms_sdk.validation.validator import validate_page

SEED_PAGES: dict[str, dict[str, Any]] = {
    "home": {
        "version": "1.0.0",
        "meta": {"slug": "home", "title": "Home"},
        "root": {
            "type": "Container",
            "params": {},
            "children": [
                {"type": "TextBlock", "params": {"text": "Welcome!"}},
                {"type": "List", "params": {"items": ["One", "Two", "Three"]}},
                # gated by a feature flag so the gate has something to prune
                {"type": "TextBlock", "params": {"text": "New Header", "featureFlag": "newHeader"}},
            ],
        },
    },
}


class InMemoryPagesRepository(PagesRepository):
    def __init__(self, pages: dict[str, dict[str, Any]] | None = None, seed: bool = True):
        self._pages: dict[str, dict[str, Any]] = copy.deepcopy(SEED_PAGES) if seed else {}
        for slug, page in (pages or {}).items():
            self.add(page, slug=slug)

    def add(self, page: dict[str, Any], slug: str | None = None) -> None:
        validate_page(page)
        key = slug or page["meta"].get("slug")
        if not key:
            raise ValueError("Page needs a slug (argument or meta.slug)")
        self._pages[key] = copy.deepcopy(page)

    async def find_by_slug(self, slug: str) -> dict[str, Any] | None:
        page = self._pages.get(slug)
        # copies keep request-time mutation away from the stored page
        return copy.deepcopy(page) if page is not None else None
