"""Sidebar resolution.

Turns author-written sidebar items into resolved items where every document
carries a display label taken from its content file. Sibling items resolve
concurrently but always come back in input order.
"""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from navstage.core.content import ContentLocator
from navstage.core.errors import MissingTitleError, SidebarError
from navstage.core.titles import title_for
from navstage.core.types import (
    CategoryRef,
    DocRef,
    InputItem,
    LinkRef,
    ResolvedCategory,
    ResolvedCategoryLink,
    ResolvedDoc,
    ResolvedItem,
    ResolvedLink,
)

logger = logging.getLogger(__name__)


class SidebarResolver:
    """Resolves the items of one sidebar group.

    The group key is a path component used to find content files: doc
    ``intro`` of group ``guides`` is looked up as ``**/guides/intro.md``.
    Any lookup error aborts the whole group.
    """

    def __init__(self, locator: ContentLocator, group_key: str) -> None:
        """Initialize resolver.

        Args:
            locator: Content locator for the content root
            group_key: Sidebar group being resolved
        """
        self._locator = locator
        self._group_key = group_key

    @property
    def group_key(self) -> str:
        return self._group_key

    async def resolve(self, items: Sequence[InputItem]) -> tuple[ResolvedItem, ...]:
        """Resolve a list of top-level items.

        Raises:
            SidebarError: On the first lookup or title error in any subtree
        """
        return await self._resolve_items(items, None)

    async def _resolve_items(
        self,
        items: Sequence[InputItem],
        category_label: str | None,
    ) -> tuple[ResolvedItem, ...]:
        # gather returns results in argument order regardless of completion order
        resolved = await asyncio.gather(
            *(self._resolve_item(item, category_label) for item in items),
        )
        return tuple(resolved)

    async def _resolve_item(
        self,
        item: InputItem,
        category_label: str | None,
    ) -> ResolvedItem:
        if isinstance(item, str):
            return await self._resolve_doc(DocRef(id=item), category_label)
        if isinstance(item, DocRef):
            return await self._resolve_doc(item, category_label)
        if isinstance(item, LinkRef):
            return ResolvedLink(href=item.href, label=item.label)
        if isinstance(item, CategoryRef):
            return await self._resolve_category(item)
        raise TypeError(f"Unsupported sidebar item: {item!r}")

    async def _resolve_doc(self, doc: DocRef, category_label: str | None) -> ResolvedDoc:
        label = await self._doc_label(doc)
        return ResolvedDoc(id=doc.id, label=label, category_label=category_label)

    async def _resolve_category(self, category: CategoryRef) -> ResolvedCategory:
        items, link = await asyncio.gather(
            self._resolve_items(category.items, category.label),
            self._resolve_category_link(category.link),
        )
        return ResolvedCategory(
            label=category.label,
            items=items,
            link=link,
            extras=category.extras,
        )

    async def _resolve_category_link(
        self,
        link: str | DocRef | None,
    ) -> ResolvedCategoryLink | None:
        if not link:
            return None
        if isinstance(link, str):
            return ResolvedCategoryLink(id=link, label=await self._lookup_label(link))
        return ResolvedCategoryLink(id=link.id, label=await self._doc_label(link))

    async def _doc_label(self, doc: DocRef) -> str:
        if doc.label is None:
            return await self._lookup_label(doc.id)
        # an explicit label never falls back to the content file
        if not doc.label.strip():
            raise MissingTitleError(group_key=self._group_key, doc_id=doc.id)
        return doc.label

    async def _lookup_label(self, doc_id: str) -> str:
        content = await self._locator.locate(self._group_key, doc_id)
        label = title_for(content.front_matter, content.body)
        if label is None:
            raise MissingTitleError(group_key=self._group_key, doc_id=doc_id)
        return label


async def resolve_sidebar(
    root_dir: Path,
    group_key: str,
    items: Sequence[InputItem],
) -> tuple[ResolvedItem, ...]:
    """Resolve one sidebar group against a content root.

    Args:
        root_dir: Root content directory
        group_key: Sidebar group key (also the content path namespace)
        items: Input items of the group

    Returns:
        Resolved items in input order

    Raises:
        SidebarError: If any document cannot be resolved
    """
    resolver = SidebarResolver(ContentLocator(root_dir), group_key)
    return await resolver.resolve(items)


@dataclass(frozen=True)
class SidebarResolution:
    """Outcome of resolving every group of a sidebar configuration."""

    groups: dict[str, tuple[ResolvedItem, ...]] = field(default_factory=dict)
    errors: dict[str, SidebarError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


async def resolve_sidebar_config(
    root_dir: Path,
    sidebar: Mapping[str, Sequence[InputItem]],
    *,
    locator: ContentLocator | None = None,
) -> SidebarResolution:
    """Resolve every group of a sidebar configuration.

    Groups are isolated: a failing group is reported in ``errors`` and does
    not prevent the other groups from resolving.

    Args:
        root_dir: Root content directory
        sidebar: Mapping of group key to input items
        locator: Content locator to use (default: one for root_dir)

    Returns:
        SidebarResolution with resolved groups and per-group errors
    """
    locator = locator or ContentLocator(root_dir)
    keys = list(sidebar)
    outcomes = await asyncio.gather(
        *(SidebarResolver(locator, key).resolve(sidebar[key]) for key in keys),
        return_exceptions=True,
    )

    groups: dict[str, tuple[ResolvedItem, ...]] = {}
    errors: dict[str, SidebarError] = {}
    for key, outcome in zip(keys, outcomes, strict=True):
        if isinstance(outcome, SidebarError):
            logger.debug(f"Sidebar group {key} failed: {outcome}")
            errors[key] = outcome
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            logger.debug(f"Sidebar group {key} resolved with {len(outcome)} items")
            groups[key] = outcome

    return SidebarResolution(groups=groups, errors=errors)
