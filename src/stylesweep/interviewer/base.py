"""Interviewer protocol definition."""

from __future__ import annotations

from typing import Protocol

from stylesweep.model.question import Answer, Question


class Interviewer(Protocol):
    """Anything that can answer the prompts of an interactive scan.

    Deletions only happen after ``ask`` returns a YES answer to a
    YES_NO question.
    """

    def ask(self, question: Question) -> Answer: ...
