"""Navstage - sidebar resolution for documentation portals."""

from navstage.core.consistency import ConsistencyIssue, check_navigation
from navstage.core.content import ContentFile, ContentLocator, locate
from navstage.core.errors import (
    AmbiguousDocError,
    ContentReadError,
    DocNotFoundError,
    FrontMatterError,
    MissingTitleError,
    SidebarError,
)
from navstage.core.sidebar import (
    SidebarResolution,
    SidebarResolver,
    resolve_sidebar,
    resolve_sidebar_config,
)
from navstage.core.titles import title_for

__all__ = [
    "AmbiguousDocError",
    "ContentReadError",
    "ConsistencyIssue",
    "ContentFile",
    "ContentLocator",
    "DocNotFoundError",
    "FrontMatterError",
    "MissingTitleError",
    "SidebarError",
    "SidebarResolution",
    "SidebarResolver",
    "check_navigation",
    "locate",
    "resolve_sidebar",
    "resolve_sidebar_config",
    "title_for",
]
