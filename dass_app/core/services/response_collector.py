"""Service holding the in-progress DASS-21 answer set."""

from __future__ import annotations

from dass_app.constants.instrument import ITEM_COUNT, ResponseScale
from dass_app.core.models import IncompleteAnswersError, RespondentMetadata, SubmissionPayload


class ResponseCollector:
    """Fixed-length answer set; slots are ``None`` until answered.

    Item indices are 1-based to match the printed instrument.
    """

    def __init__(self) -> None:
        self._answers: list[ResponseScale | None] = [None] * ITEM_COUNT
        self._frozen: bool = False

    def set_answer(self, item_index: int, value: int) -> None:
        """Replace the answer for one item.

        Raises:
            ValueError: If the index or value is out of range.
            RuntimeError: If the answer set is frozen for submission.
        """
        if isinstance(item_index, bool) or not isinstance(item_index, int):
            raise ValueError(f"Item index must be an integer, got {item_index!r}.")
        if not 1 <= item_index <= ITEM_COUNT:
            raise ValueError(f"Item index must be between 1 and {ITEM_COUNT}, got {item_index}.")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Answer must be an integer between 0 and 3, got {value!r}.")
        try:
            scale_value = ResponseScale(value)
        except ValueError as exc:
            raise ValueError(f"Answer must be between 0 and 3, got {value}.") from exc
        if self._frozen:
            raise RuntimeError("Answers cannot change while a submission is in progress.")
        self._answers[item_index - 1] = scale_value

    def get_answer(self, item_index: int) -> ResponseScale | None:
        if not 1 <= item_index <= ITEM_COUNT:
            raise ValueError(f"Item index must be between 1 and {ITEM_COUNT}, got {item_index}.")
        return self._answers[item_index - 1]

    def answers(self) -> tuple[int | None, ...]:
        """Snapshot of all slots in item order."""
        return tuple(None if answer is None else int(answer) for answer in self._answers)

    def answered_count(self) -> int:
        return sum(1 for answer in self._answers if answer is not None)

    def unanswered_items(self) -> list[int]:
        return [position for position, answer in enumerate(self._answers, start=1) if answer is None]

    def is_complete(self) -> bool:
        return all(answer is not None for answer in self._answers)

    def reset(self) -> None:
        self._answers = [None] * ITEM_COUNT
        self._frozen = False

    def freeze(self) -> None:
        self._frozen = True

    def unfreeze(self) -> None:
        self._frozen = False

    def is_frozen(self) -> bool:
        return self._frozen

    def build_payload(self, metadata: RespondentMetadata) -> SubmissionPayload:
        """Build the submission payload from a fully answered set.

        Raises:
            IncompleteAnswersError: If any item is still unanswered.
        """
        unanswered = self.unanswered_items()
        if unanswered:
            raise IncompleteAnswersError(unanswered)
        return SubmissionPayload.build(metadata, [int(answer) for answer in self._answers])
