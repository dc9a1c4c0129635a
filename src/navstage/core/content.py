"""Content file lookup.

Finds the single markdown file backing a sidebar document reference and
splits it into front matter and body.
"""

import asyncio
import glob
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from navstage.core.errors import (
    AmbiguousDocError,
    ContentReadError,
    DocNotFoundError,
    FrontMatterError,
)
from navstage.core.frontmatter import FrontMatterParser, parse_front_matter

logger = logging.getLogger(__name__)

CONTENT_EXTENSIONS = ("md", "mdx")


@dataclass(frozen=True)
class ContentFile:
    """Located and parsed content file."""

    path: Path
    front_matter: dict[str, Any]
    body: str


class ContentLocator:
    """Locates content files under a root directory.

    A document ``<doc_id>`` of group ``<group_key>`` lives at any depth below
    the root, at a path ending with ``<group_key>/<doc_id>.md`` or ``.mdx``.
    Exactly one file must match.
    """

    def __init__(
        self,
        root_dir: Path,
        *,
        parser: FrontMatterParser = parse_front_matter,
    ) -> None:
        """Initialize locator.

        Args:
            root_dir: Root content directory
            parser: Front matter parser applied to matched files
        """
        self._root_dir = root_dir
        self._parser = parser

    @property
    def root_dir(self) -> Path:
        """Root content directory."""
        return self._root_dir

    async def locate(self, group_key: str, doc_id: str) -> ContentFile:
        """Find and parse the content file for a document.

        Args:
            group_key: Sidebar group the document belongs to
            doc_id: Document id relative to the group directory

        Returns:
            ContentFile with parsed front matter and body

        Raises:
            DocNotFoundError: If no file matches
            AmbiguousDocError: If more than one file matches
            ContentReadError: If the matched file cannot be read as UTF-8
            FrontMatterError: If the matched file has invalid front matter
        """
        matches = await asyncio.to_thread(self.find_matches, group_key, doc_id)

        if not matches:
            raise DocNotFoundError(group_key=group_key, doc_id=doc_id)
        if len(matches) > 1:
            raise AmbiguousDocError(group_key=group_key, doc_id=doc_id, matches=matches)

        path = matches[0]
        logger.debug(f"Resolved doc {group_key}/{doc_id} to {path}")
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(
                group_key=group_key,
                doc_id=doc_id,
                path=path,
                reason=str(e),
            ) from e

        try:
            front_matter, body = self._parser(text)
        except ValueError as e:
            raise FrontMatterError(
                group_key=group_key,
                doc_id=doc_id,
                path=path,
                reason=str(e),
            ) from e

        return ContentFile(path=path, front_matter=front_matter, body=body)

    def find_matches(self, group_key: str, doc_id: str) -> list[Path]:
        """List files matching a document reference, sorted by path.

        Args:
            group_key: Sidebar group the document belongs to
            doc_id: Document id relative to the group directory

        Returns:
            Sorted list of matching file paths (empty if root is missing).
            Files inside hidden directories (e.g. ``.drafts/``) are skipped.
        """
        if not self._root_dir.is_dir():
            return []

        stem = f"{glob.escape(group_key)}/{glob.escape(doc_id)}"
        matches: set[Path] = set()
        for ext in CONTENT_EXTENSIONS:
            for path in self._root_dir.glob(f"**/{stem}.{ext}"):
                if _in_hidden_dir(path.relative_to(self._root_dir), stem):
                    continue
                if path.is_file():
                    matches.add(path)
        return sorted(matches)


async def locate(root_dir: Path, group_key: str, doc_id: str) -> ContentFile:
    """Find and parse a content file with the default front matter parser."""
    return await ContentLocator(root_dir).locate(group_key, doc_id)


def _in_hidden_dir(relative: Path, stem: str) -> bool:
    """Check whether the ``**`` part of a match passes through a dot directory."""
    prefix = relative.parts[: -len(Path(stem).parts)]
    return any(part.startswith(".") for part in prefix)
