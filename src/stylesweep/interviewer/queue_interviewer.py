"""QueueInterviewer: answers prompts from a prepared sequence of replies."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from stylesweep.model.question import Answer, AnswerValue, Question, QuestionType


class QueueInterviewer:
    """Interviewer fed with canned replies, one per question, in order.

    Replies are raw strings interpreted like console input ("y", "2",
    "src/"). When the queue runs dry every further question is SKIPPED.
    """

    def __init__(self, replies: Iterable[str] = ()) -> None:
        self._replies: deque[str] = deque(replies)
        self.asked: list[Question] = []

    def push(self, reply: str) -> None:
        self._replies.append(reply)

    @property
    def remaining(self) -> int:
        return len(self._replies)

    def ask(self, question: Question) -> Answer:
        self.asked.append(question)
        if not self._replies:
            return Answer(value=AnswerValue.SKIPPED, text="")
        raw = self._replies.popleft().strip()
        if question.type == QuestionType.YES_NO:
            if raw.lower() in ("y", "yes"):
                return Answer(value=AnswerValue.YES, text="YES")
            return Answer(value=AnswerValue.NO, text=raw)
        for opt in question.options:
            if raw == opt.key:
                return Answer(value=opt.key, selected_option=opt, text=opt.label)
        return Answer(value=raw, text=raw)
