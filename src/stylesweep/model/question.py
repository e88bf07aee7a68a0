"""Question model: prompts asked during an interactive scan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuestionType(Enum):
    """Kind of prompt presented to the user."""

    YES_NO = "YES_NO"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    FREEFORM = "FREEFORM"


class AnswerValue(Enum):
    """Canonical answer values for yes/no prompts."""

    YES = "YES"
    NO = "NO"
    SKIPPED = "SKIPPED"


@dataclass(frozen=True)
class Option:
    """A selectable entry of a multiple-choice prompt."""

    key: str
    label: str


@dataclass(frozen=True)
class Question:
    """A prompt such as "Delete unused styles from this file?"."""

    text: str
    type: QuestionType
    options: tuple[Option, ...] = ()
    default: str | None = None
    file: str = ""


@dataclass
class Answer:
    """The user's response to a Question."""

    value: AnswerValue | str | None = None
    selected_option: Option | None = None
    text: str = ""

    @property
    def is_yes(self) -> bool:
        return self.value is AnswerValue.YES

    @property
    def is_no(self) -> bool:
        return self.value is AnswerValue.NO

    @property
    def was_skipped(self) -> bool:
        return self.value is AnswerValue.SKIPPED
