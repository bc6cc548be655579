"""
Size resolution for ad units.

Ad units describe accepted sizes in several places: ``mediaTypes.banner.sizes``,
``mediaTypes.video.sizes``, ``mediaTypes.video.playerSize`` and the legacy
top-level ``sizes``. Each of those may hold a single ``[w, h]`` pair or a
list of pairs. This module reduces all of them to one flat list of size
strings.
"""

from typing import Any, Optional

from ..models.ad_unit import AdUnit, MediaType
from .constants import TELEMETRY_SIZE_SEPARATOR
from .formatting import number_to_string

# Per-media-type size fields, in concatenation order
MEDIA_TYPE_SIZE_FIELDS: tuple[tuple[str, str], ...] = (
    (MediaType.BANNER.value, 'sizes'),
    (MediaType.VIDEO.value, 'sizes'),
    (MediaType.VIDEO.value, 'playerSize'),
)


def _is_dimension(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and value.strip().isdigit()


def is_size_pair(value: Any) -> bool:
    """Check whether a value is a single ``[width, height]`` pair of numbers."""
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(_is_dimension(v) for v in value)
    )


def collect_media_type_sizes(ad_unit: AdUnit) -> Optional[list[Any]]:
    """
    Concatenate every per-media-type size list of an ad unit.

    Returns None when the ad unit declares no per-media-type sizes at all,
    so the caller can fall back to the top-level ``sizes`` field.
    """
    declared = [
        ad_unit.media_type_sizes(media_type, key)
        for media_type, key in MEDIA_TYPE_SIZE_FIELDS
    ]
    if all(sizes is None for sizes in declared):
        return None

    collected: list[Any] = []
    for sizes in declared:
        if not sizes:
            continue
        if is_size_pair(sizes):
            collected.append(sizes)
        else:
            # List of entries: flatten one level
            collected.extend(sizes)
    return collected


def format_size(size: Any, separator: str = TELEMETRY_SIZE_SEPARATOR) -> Optional[str]:
    """
    Render one size entry.

    Pairs render as ``"<w><sep><h>"``. Strings such as ``"300x250"`` or
    ``"300,250"`` are re-rendered with ``separator``; any other string is
    kept verbatim. Anything else yields None.
    """
    if is_size_pair(size):
        width, height = size
        return f"{number_to_string(width)}{separator}{number_to_string(height)}"
    if isinstance(size, str):
        for candidate in ('x', ','):
            parts = size.split(candidate)
            if len(parts) == 2 and all(p.strip().isdigit() for p in parts):
                return f"{parts[0].strip()}{separator}{parts[1].strip()}"
        return size
    return None


def _size_entries(sizes: list[Any]) -> list[Any]:
    """Split a raw size field into individual entries."""
    if is_size_pair(sizes):
        return [sizes]
    return list(sizes)


def resolve_sizes(ad_unit: AdUnit, separator: str = TELEMETRY_SIZE_SEPARATOR) -> list[str]:
    """
    Resolve the canonical size list of an ad unit.

    Per-media-type sizes (banner, video sizes, video player size) are all
    concatenated. When none are declared, the top-level ``sizes`` field is
    used instead. An ad unit without any size information yields ``[]``.

    Args:
        ad_unit: The ad unit to resolve
        separator: Separator between width and height (``","`` for
            telemetry, ``"x"`` for bid requests)

    Returns:
        Size strings in declaration order
    """
    sizes = collect_media_type_sizes(ad_unit)
    if sizes is None:
        sizes = ad_unit.sizes

    resolved = []
    for entry in _size_entries(sizes or []):
        formatted = format_size(entry, separator)
        if formatted:
            resolved.append(formatted)
    return resolved


def summarize_sizes(ad_unit: AdUnit) -> str:
    """Render all sizes of an ad unit as one comma-joined display string."""
    return TELEMETRY_SIZE_SEPARATOR.join(resolve_sizes(ad_unit))
