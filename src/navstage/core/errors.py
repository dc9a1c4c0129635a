"""Sidebar resolution errors.

Every error names the sidebar group and the document id it concerns so a
failed build can be diagnosed without re-running it.
"""

from pathlib import Path


class SidebarError(Exception):
    """Base class for errors raised while resolving a sidebar group."""

    def __init__(self, message: str, *, group_key: str, doc_id: str) -> None:
        super().__init__(message)
        self.group_key = group_key
        self.doc_id = doc_id


class DocNotFoundError(SidebarError):
    """No content file matches the document id within its group."""

    def __init__(self, *, group_key: str, doc_id: str) -> None:
        super().__init__(
            f"No file found for doc {group_key}/{doc_id}",
            group_key=group_key,
            doc_id=doc_id,
        )


class AmbiguousDocError(SidebarError):
    """More than one content file matches the document id."""

    def __init__(self, *, group_key: str, doc_id: str, matches: list[Path]) -> None:
        listing = ", ".join(str(path) for path in matches)
        super().__init__(
            f"Multiple files found for doc {group_key}/{doc_id}: {listing}",
            group_key=group_key,
            doc_id=doc_id,
        )
        self.matches = matches


class MissingTitleError(SidebarError):
    """Matched content file yields no usable label."""

    def __init__(self, *, group_key: str, doc_id: str) -> None:
        super().__init__(
            f"No title found for doc `{doc_id}` in sidebar `{group_key}`",
            group_key=group_key,
            doc_id=doc_id,
        )


class FrontMatterError(SidebarError):
    """Matched content file has front matter that cannot be parsed."""

    def __init__(self, *, group_key: str, doc_id: str, path: Path, reason: str) -> None:
        super().__init__(
            f"Invalid front matter in {path} (doc {group_key}/{doc_id}): {reason}",
            group_key=group_key,
            doc_id=doc_id,
        )
        self.path = path


class ContentReadError(SidebarError):
    """Matched content file cannot be read or is not valid UTF-8."""

    def __init__(self, *, group_key: str, doc_id: str, path: Path, reason: str) -> None:
        super().__init__(
            f"Cannot read {path} (doc {group_key}/{doc_id}): {reason}",
            group_key=group_key,
            doc_id=doc_id,
        )
        self.path = path
