"""Autopatcher mirror catalog.

Each platform has its own autopatcher repository, mirrored on one or more
hosts. Mirrors are listed in the order they should be tried.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from am2rlauncher.bootstrap.platform import PlatformKind
from am2rlauncher.core.logging import get_logger

LOGGER = get_logger(__name__)

_MIRRORS: Dict[PlatformKind, Tuple[str, ...]] = {
    PlatformKind.WINDOWS: (
        "https://github.com/AM2R-Community-Developers/AM2R-Autopatcher-Windows.git",
        "https://gitlab.com/am2r-community-developers/AM2R-Autopatcher-Windows.git",
    ),
    PlatformKind.LINUX: (
        "https://github.com/AM2R-Community-Developers/AM2R-Autopatcher-Linux.git",
        "https://gitlab.com/am2r-community-developers/AM2R-Autopatcher-Linux.git",
    ),
    # TODO: add the GitLab mirror once the Mac autopatcher moves to the community org
    PlatformKind.MAC: (
        "https://github.com/Miepee/AM2R-Autopatcher-Mac.git",
    ),
}


def mirrors_for(kind: PlatformKind) -> List[str]:
    """Return the autopatcher mirrors for a platform, first-preferred first.

    Args:
        kind: Platform to list mirrors for.

    Returns:
        A new list of mirror URLs; empty for unsupported platforms.
    """
    mirrors = _MIRRORS.get(kind)
    if mirrors is None:
        LOGGER.error(f"{kind.value} has no mirror lists!")
        return []
    return list(mirrors)


def preferred_mirrors(
    kind: PlatformKind,
    mirror_index: int = 0,
    custom_mirror: Optional[str] = None,
) -> List[str]:
    """Return the order in which mirrors should be tried.

    A custom mirror always comes first. The catalog follows, rotated so the
    mirror selected by ``mirror_index`` leads.

    Args:
        kind: Platform to list mirrors for.
        mirror_index: Index into the catalog of the preferred mirror.
        custom_mirror: User-supplied mirror URL, if any.

    Returns:
        Ordered list of mirror URLs without duplicates.
    """
    catalog = mirrors_for(kind)

    if catalog and not 0 <= mirror_index < len(catalog):
        LOGGER.error(
            f"Mirror index {mirror_index} is out of range for {kind.value}, using 0."
        )
        mirror_index = 0
    ordered = catalog[mirror_index:] + catalog[:mirror_index]

    if custom_mirror and custom_mirror.strip():
        custom = custom_mirror.strip()
        ordered = [custom] + [url for url in ordered if url != custom]

    return ordered
