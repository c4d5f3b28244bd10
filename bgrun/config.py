from __future__ import annotations

from dataclasses import dataclass

POPUP_WIDTH = 60
POPUP_HEIGHT = 9
SETTLE_DELAY_S = 0.1

# Smallest popup still worth drawing: a border plus one row of text.
MIN_POPUP_WIDTH = 12
MIN_POPUP_HEIGHT = 3


@dataclass
class NotifierConfig:
    width: int = POPUP_WIDTH
    height: int = POPUP_HEIGHT
    settle_delay: float = SETTLE_DELAY_S
    use_color: bool = True
