"""Dataclasses representing lookup results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

POS_SYMBOLS = {
    "n": "[n]",
    "v": "[v]",
    "a": "[adj]",
    "s": "[adj]",  # satellite adjective
    "r": "[adv]",
}
UNKNOWN_POS_SYMBOL = "[?]"


def pos_symbol(code: Optional[str]) -> str:
    """Map a part-of-speech code to its display symbol."""

    if not isinstance(code, str):
        return UNKNOWN_POS_SYMBOL
    return POS_SYMBOLS.get(code, UNKNOWN_POS_SYMBOL)


@dataclass
class Meaning:
    part_of_speech: Optional[str]
    definition: str
    examples: List[str] = field(default_factory=list)

    @property
    def symbol(self) -> str:
        return pos_symbol(self.part_of_speech)
