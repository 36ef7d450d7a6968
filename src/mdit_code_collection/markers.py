"""The grouping marker syntax.

A group is opened with a marker paragraph listing its tabs::

    {{ group="install" tabs=["pip", "uv"] }}

and closed with::

    {{ /group }}

Fenced code blocks join a group through attributes in their info string,
for example ``python group="install" tab="pip"``.
"""

import logging
import re
from dataclasses import dataclass

from beartype import beartype

logger = logging.getLogger(__name__)

OPEN_MARKER_PATTERN = re.compile(
    pattern=r'\{\{\s*group="(?P<group>[^"]+)"(?:\s+tabs=(?P<tabs>.*?))?\s*\}\}',
)
CLOSE_MARKER_PATTERN = re.compile(pattern=r"\{\{\s*/group\s*\}\}")

# Attribute names must not be the tail of a longer name such as "subgroup".
FENCE_GROUP_PATTERN = re.compile(pattern=r'(?<![\w-])group="(?P<value>[^"]+)"')
FENCE_TAB_PATTERN = re.compile(pattern=r'(?<![\w-])tab="(?P<value>[^"]+)"')


@beartype
@dataclass(frozen=True)
class GroupMarker:
    """A parsed open-group marker.

    Attributes:
        group: The group name, as written.
        tabs: The tab labels, in the order they were written.
    """

    group: str
    tabs: tuple[str, ...]


@beartype
@dataclass(frozen=True)
class FenceGroup:
    """The group and tab a fenced code block belongs to.

    Attributes:
        group: The normalized group name.
        tab: The normalized tab name.
    """

    group: str
    tab: str


@beartype
def parse_tab_labels(raw: str) -> tuple[str, ...]:
    """Parse a bracketed, comma separated list of quoted tab labels.

    Parsing is best-effort: anything which is not a bracketed list gives
    no labels.

    Args:
        raw: The list, e.g. ``["JS", "Go"]``.

    Returns:
        The labels with surrounding whitespace and quotes removed.
    """
    stripped = raw.strip()
    if not stripped:
        return ()
    if not (stripped.startswith("[") and stripped.endswith("]")):
        logger.warning("Ignoring malformed tab list %r", raw)
        return ()

    labels: list[str] = []
    for item in stripped[1:-1].split(","):
        label = item.strip().replace('"', "").replace("'", "").strip()
        if label:
            labels.append(label)
    return tuple(labels)


@beartype
def parse_open_marker(content: str) -> GroupMarker | None:
    """Find an open-group marker in inline content.

    Returns:
        The marker, or ``None`` if the content does not contain one.
    """
    match = OPEN_MARKER_PATTERN.search(string=content)
    if match is None:
        return None

    raw_tabs = match.group("tabs")
    tabs = parse_tab_labels(raw=raw_tabs) if raw_tabs is not None else ()
    return GroupMarker(group=match.group("group"), tabs=tabs)


@beartype
def is_close_marker(content: str) -> bool:
    """Whether inline content is exactly a close-group marker."""
    return CLOSE_MARKER_PATTERN.fullmatch(string=content.strip()) is not None


@beartype
def normalize_name(name: str) -> str:
    """Normalize a group or tab name for use in a CSS class.

    Only the first space is replaced. ``"Hello big World"`` becomes
    ``"hello-big world"``.
    """
    return name.lower().replace(" ", "-", 1)


@beartype
def parse_fence_group(info: str) -> FenceGroup | None:
    """Find the group and tab attributes in a fence info string.

    Empty attribute values are rejected, so such blocks are rendered
    without a group.

    Returns:
        The normalized group and tab, or ``None`` unless both attributes
        are present.
    """
    group_match = FENCE_GROUP_PATTERN.search(string=info)
    tab_match = FENCE_TAB_PATTERN.search(string=info)
    if group_match is None or tab_match is None:
        return None

    return FenceGroup(
        group=normalize_name(name=group_match.group("value")),
        tab=normalize_name(name=tab_match.group("value")),
    )
