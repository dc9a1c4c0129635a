"""Navigation build cycle.

Resolves every sidebar group of the configuration and checks the result
against the top navigation. A build produces an immutable NavigationResult
that is held for the lifetime of the cycle.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from navstage.config import Config
from navstage.core.consistency import ConsistencyIssue, check_navigation
from navstage.core.content import ContentLocator
from navstage.core.errors import SidebarError
from navstage.core.sidebar import resolve_sidebar_config
from navstage.core.types import ResolvedItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationResult:
    """Resolved sidebar groups, per-group errors and consistency issues."""

    groups: dict[str, tuple[ResolvedItem, ...]] = field(default_factory=dict)
    errors: dict[str, SidebarError] = field(default_factory=dict)
    issues: list[ConsistencyIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every group resolved and no fatal issue was found."""
        return not self.errors and not any(issue.fatal for issue in self.issues)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sidebar": {
                key: [item.to_dict() for item in items]
                for key, items in self.groups.items()
            },
            "errors": {key: str(error) for key, error in self.errors.items()},
            "issues": [issue.to_dict() for issue in self.issues],
        }


class NavigationBuilder:
    """Runs sidebar resolution and the consistency check for a config."""

    def __init__(self, config: Config) -> None:
        self._config = config
        self._locator = ContentLocator(config.docs.source_dir)

    @property
    def source_dir(self) -> Path:
        """Root content directory."""
        return self._locator.root_dir

    async def build(self) -> NavigationResult:
        """Resolve all sidebar groups and check them against top navigation.

        Returns:
            NavigationResult for this build cycle
        """
        sidebar = self._config.sidebar
        navigation = self._config.navigation

        if sidebar is None:
            logger.info("No sidebar configured")
            return NavigationResult()

        resolution = await resolve_sidebar_config(
            self._locator.root_dir,
            sidebar,
            locator=self._locator,
        )
        for key, error in resolution.errors.items():
            logger.error(f"Failed to resolve sidebar {key}: {error}")

        issues = check_navigation(
            sidebar.keys(),
            navigation.top_ids,
            fatal=navigation.consistency_fatal,
        )
        for issue in issues:
            if issue.fatal:
                logger.error(issue.message)
            else:
                logger.warning(issue.message)

        return NavigationResult(
            groups=resolution.groups,
            errors=resolution.errors,
            issues=issues,
        )
