"""YAML front matter splitting.

Front matter is a YAML mapping between two ``---`` lines at the very top of
a file. Everything after the closing delimiter is the body.
"""

import re
from typing import Any, Protocol

import yaml

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


class FrontMatterParser(Protocol):
    """Splits raw file text into a front matter mapping and a body."""

    def __call__(self, text: str) -> tuple[dict[str, Any], str]: ...


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split text into front matter and body.

    Args:
        text: Raw file content

    Returns:
        Tuple of (front matter mapping, body). Files without front matter
        yield an empty mapping and the whole text as body.

    Raises:
        ValueError: If the front matter is not valid YAML or not a mapping
    """
    text = text.removeprefix("\ufeff")
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("front matter must be a mapping")

    return data, text[match.end() :]
