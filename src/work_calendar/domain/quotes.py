from __future__ import annotations

import random
from typing import Optional

QUOTES: tuple[str, ...] = (
    "這工作量讓我懷疑人生。",
    "每天都在開會，會會相連到天邊。",
    "進度永遠趕不上變更。",
    "我不是在工作，就是在準備工作。",
    "我需要的不只是咖啡，還有奇蹟。",
    "時間不夠用，還要開報告會議。",
)


def pick_quote(rng: Optional[random.Random] = None) -> str:
    chooser = rng or random
    return chooser.choice(QUOTES)
