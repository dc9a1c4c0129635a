"""Sidebar item types.

Input items are what authors write in the sidebar configuration. Resolved
items are what the resolver produces: every document carries a label.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, NotRequired, TypedDict


@dataclass(frozen=True)
class DocRef:
    """Reference to a content document by id."""

    id: str
    label: str | None = None


@dataclass(frozen=True)
class LinkRef:
    """External or absolute link, never resolved against content."""

    href: str
    label: str


@dataclass(frozen=True)
class CategoryRef:
    """Group of nested sidebar items with an optional own target."""

    label: str
    items: tuple[InputItem, ...]
    link: str | DocRef | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))


InputItem = str | DocRef | LinkRef | CategoryRef


class ResolvedDocDict(TypedDict):
    type: str
    id: str
    label: str
    categoryLabel: NotRequired[str]


class ResolvedLinkDict(TypedDict):
    type: str
    href: str
    label: str


@dataclass(frozen=True)
class ResolvedDoc:
    """Document with its display label."""

    id: str
    label: str
    category_label: str | None = None

    def to_dict(self) -> ResolvedDocDict:
        """Convert to dictionary for JSON serialization."""
        result: ResolvedDocDict = {"type": "doc", "id": self.id, "label": self.label}
        if self.category_label is not None:
            result["categoryLabel"] = self.category_label
        return result


@dataclass(frozen=True)
class ResolvedLink:
    """Link passed through from the input unchanged."""

    href: str
    label: str

    def to_dict(self) -> ResolvedLinkDict:
        """Convert to dictionary for JSON serialization."""
        return {"type": "link", "href": self.href, "label": self.label}


@dataclass(frozen=True)
class ResolvedCategoryLink:
    """Resolved target of a category. Never carries a category label."""

    id: str
    label: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"type": "doc", "id": self.id, "label": self.label}


@dataclass(frozen=True)
class ResolvedCategory:
    """Category with resolved children and link."""

    label: str
    items: tuple[ResolvedItem, ...]
    link: ResolvedCategoryLink | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Author-supplied extras (e.g. ``collapsed``) are emitted first so the
        resolved fields always win.
        """
        result: dict[str, Any] = dict(self.extras)
        result["type"] = "category"
        result["label"] = self.label
        result["items"] = [item.to_dict() for item in self.items]
        if self.link is not None:
            result["link"] = self.link.to_dict()
        return result


ResolvedItem = ResolvedDoc | ResolvedLink | ResolvedCategory


def parse_sidebar_item(raw: object, where: str) -> InputItem:
    """Normalize one raw configuration value into an input item.

    Args:
        raw: Value from the sidebar configuration (string or table)
        where: Dotted location used in error messages (e.g. "sidebar.guides[0]")

    Returns:
        Parsed input item; bare strings stay strings

    Raises:
        ValueError: If the value does not describe a sidebar item
    """
    if isinstance(raw, str):
        if not raw:
            raise ValueError(f"{where} must be a non-empty doc id")
        return raw

    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be a string or a table")

    item_type = raw.get("type")
    if item_type == "doc":
        return _parse_doc(raw, where)
    if item_type == "link":
        return _parse_link(raw, where)
    if item_type == "category":
        return _parse_category(raw, where)
    raise ValueError(f'{where}.type must be one of "doc", "link", "category"')


def parse_sidebar_items(raw: object, where: str) -> tuple[InputItem, ...]:
    """Normalize a list of raw sidebar items."""
    if not isinstance(raw, list):
        raise ValueError(f"{where} must be a list")
    return tuple(parse_sidebar_item(item, f"{where}[{i}]") for i, item in enumerate(raw))


def _parse_doc(raw: dict[str, Any], where: str) -> DocRef:
    doc_id = raw.get("id")
    if not isinstance(doc_id, str) or not doc_id:
        raise ValueError(f"{where}.id must be a non-empty string")

    label = raw.get("label")
    if label is not None and (not isinstance(label, str) or not label.strip()):
        raise ValueError(f"{where}.label must be a non-empty string")

    return DocRef(id=doc_id, label=label)


def _parse_link(raw: dict[str, Any], where: str) -> LinkRef:
    href = raw.get("href")
    if not isinstance(href, str):
        raise ValueError(f"{where}.href must be a string")

    label = raw.get("label")
    if not isinstance(label, str):
        raise ValueError(f"{where}.label must be a string")

    return LinkRef(href=href, label=label)


def _parse_category(raw: dict[str, Any], where: str) -> CategoryRef:
    label = raw.get("label")
    if not isinstance(label, str):
        raise ValueError(f"{where}.label must be a string")

    items = parse_sidebar_items(raw.get("items"), f"{where}.items")

    link_raw = raw.get("link")
    link: str | DocRef | None
    if link_raw is None or isinstance(link_raw, str):
        link = link_raw or None
    elif isinstance(link_raw, dict):
        if link_raw.get("type", "doc") != "doc":
            raise ValueError(f'{where}.link.type must be "doc"')
        link = _parse_doc(link_raw, f"{where}.link")
    else:
        raise ValueError(f"{where}.link must be a string or a table")

    extras = {
        key: value
        for key, value in raw.items()
        if key not in ("type", "label", "items", "link")
    }
    return CategoryRef(label=label, items=items, link=link, extras=extras)
