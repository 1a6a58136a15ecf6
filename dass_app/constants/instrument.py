"""Static DASS-21 item catalog and response scale."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

ITEM_COUNT: int = 21
# Maximum per-subscale score reported by the scoring service (7 items x 3, doubled).
SUBSCALE_MAX: int = 42
TOTAL_MAX: int = SUBSCALE_MAX * 3


@dataclass(frozen=True, slots=True)
class Item:
    """A single statement of the instrument, numbered 1..21."""

    index: int
    text: str


class ResponseScale(IntEnum):
    """Four-level Likert scale used for every item."""

    DID_NOT_APPLY = 0
    SOME_DEGREE = 1
    CONSIDERABLE_DEGREE = 2
    MOST_OF_THE_TIME = 3

    @property
    def label(self) -> str:
        return _SCALE_LABELS[self]


_SCALE_LABELS: dict[ResponseScale, str] = {
    ResponseScale.DID_NOT_APPLY: "Did not apply to me at all",
    ResponseScale.SOME_DEGREE: "Applied to me to some degree",
    ResponseScale.CONSIDERABLE_DEGREE: "Applied to me a considerable degree",
    ResponseScale.MOST_OF_THE_TIME: "Applied to me very much or most of the time",
}

_ITEM_TEXTS: tuple[str, ...] = (
    "I found it hard to wind down",
    "I was aware of dryness of my mouth",
    "I couldn’t seem to experience any positive feeling at all",
    "I experienced breathing difficulty (e.g., excessively rapid breathing, "
    "breathlessness in the absence of physical exertion)",
    "I found it difficult to work up the initiative to do things",
    "I tended to over-react to situations",
    "I experienced trembling (e.g., in the hands)",
    "I felt that I was using a lot of nervous energy",
    "I was worried about situations in which I might panic and make a fool of myself",
    "I felt that I had nothing to look forward to",
    "I found myself getting agitated",
    "I found it difficult to relax",
    "I felt down-hearted and blue",
    "I was intolerant of anything that kept me from getting on with what I was doing",
    "I felt I was close to panic",
    "I was unable to become enthusiastic about anything",
    "I felt I wasn’t worth much as a person",
    "I felt that I was rather touchy",
    "I was aware of the beating of my heart in the absence of physical exertion "
    "(e.g., sense of heart rate increase, heart missing a beat)",
    "I felt scared without any good reason",
    "I felt that life was meaningless",
)

ITEMS: tuple[Item, ...] = tuple(
    Item(index=position, text=text) for position, text in enumerate(_ITEM_TEXTS, start=1)
)


def get_item(index: int) -> Item:
    """Return the item numbered ``index`` (1-based).

    Raises:
        ValueError: If ``index`` is outside 1..21.
    """
    if not 1 <= index <= ITEM_COUNT:
        raise ValueError(f"Item index must be between 1 and {ITEM_COUNT}, got {index}.")
    return ITEMS[index - 1]
