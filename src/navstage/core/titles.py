"""Display label extraction for content files."""

import re
from collections.abc import Mapping
from typing import Any

_H1_RE = re.compile(r"^\s*#\s(.*)$", re.MULTILINE)


def title_for(front_matter: Mapping[str, Any], body: str) -> str | None:
    """Derive a sidebar label for a content file.

    Precedence is ``sidebar_label``, then ``title``, then the first level-1
    heading in the body. A front matter key set to null counts as absent.

    Args:
        front_matter: Parsed front matter mapping
        body: Raw body text after the front matter

    Returns:
        Label, or None if the chosen value is missing, empty or not a string
    """
    label = front_matter.get("sidebar_label")
    if label is None:
        label = front_matter.get("title")
    if label is None:
        label = extract_heading(body)

    if not isinstance(label, str) or not label.strip():
        return None
    return label


def extract_heading(body: str) -> str | None:
    """Return the trimmed text of the first ``# Heading`` line, if any."""
    match = _H1_RE.search(body)
    if match is None:
        return None
    return match.group(1).strip()
