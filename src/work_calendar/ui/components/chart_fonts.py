from __future__ import annotations

from typing import Sequence

import matplotlib


def prefer_fonts(families: Sequence[str]) -> list[str]:
    """Put ``families`` at the front of matplotlib's sans-serif list, once."""

    preferred = list(families)
    current = list(matplotlib.rcParams["font.sans-serif"])
    if preferred and current[: len(preferred)] != preferred:
        matplotlib.rcParams["font.sans-serif"] = preferred + [name for name in current if name not in preferred]
    return list(matplotlib.rcParams["font.sans-serif"])
