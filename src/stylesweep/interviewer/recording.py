"""RecordingInterviewer: wraps another interviewer and records all Q&A pairs."""

from __future__ import annotations

from dataclasses import dataclass

from stylesweep.interviewer.base import Interviewer
from stylesweep.model.question import Answer, Question, QuestionType


@dataclass(frozen=True)
class QAPair:
    """A recorded question-answer exchange."""

    question: Question
    answer: Answer


class RecordingInterviewer:
    """Interviewer decorator that keeps a transcript of every exchange."""

    def __init__(self, inner: Interviewer) -> None:
        self._inner = inner
        self._records: list[QAPair] = []

    def ask(self, question: Question) -> Answer:
        answer = self._inner.ask(question)
        self._records.append(QAPair(question=question, answer=answer))
        return answer

    def transcript(self) -> list[QAPair]:
        return list(self._records)

    def _confirmations(self) -> list[QAPair]:
        return [
            pair
            for pair in self._records
            if pair.question.type == QuestionType.YES_NO and pair.question.file
        ]

    def confirmed_files(self) -> list[str]:
        """Files whose per-file deletion prompt was answered YES."""
        return [p.question.file for p in self._confirmations() if p.answer.is_yes]

    def declined_files(self) -> list[str]:
        """Files whose per-file deletion prompt was answered anything but YES."""
        return [p.question.file for p in self._confirmations() if not p.answer.is_yes]
