"""Consistency check between sidebar groups and top navigation."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ConsistencyIssue:
    """Sidebar groups that have no top navigation entry."""

    missing_keys: tuple[str, ...]
    available_ids: tuple[str, ...]
    fatal: bool = False

    @property
    def message(self) -> str:
        keys = ", ".join(f'"{key}"' for key in self.missing_keys)
        return (
            f"Sidebar ID [{keys}] not found in top navigation.\n"
            f"Following IDs are available: {', '.join(self.available_ids)}"
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "message": self.message,
            "missingKeys": list(self.missing_keys),
            "availableIds": list(self.available_ids),
            "fatal": self.fatal,
        }


def check_navigation(
    group_keys: Iterable[str] | None,
    top_nav_ids: Sequence[str] | None,
    *,
    fatal: bool = False,
) -> list[ConsistencyIssue]:
    """Report sidebar groups missing from the top navigation.

    The check is skipped when either side is not configured.

    Args:
        group_keys: Keys of the sidebar configuration, in config order
        top_nav_ids: Ids of the top navigation entries
        fatal: Severity attached to the reported issue

    Returns:
        Empty list, or a single issue listing every orphaned key
    """
    if group_keys is None or top_nav_ids is None:
        return []

    known = set(top_nav_ids)
    missing = tuple(dict.fromkeys(key for key in group_keys if key not in known))
    if not missing:
        return []

    return [
        ConsistencyIssue(
            missing_keys=missing,
            available_ids=tuple(top_nav_ids),
            fatal=fatal,
        ),
    ]
