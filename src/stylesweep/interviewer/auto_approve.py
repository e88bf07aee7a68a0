"""AutoApproveInterviewer: answers every prompt without user interaction."""

from __future__ import annotations

from stylesweep.model.question import Answer, AnswerValue, Question, QuestionType


class AutoApproveInterviewer:
    """Interviewer behind ``--yes``.

    - YES_NO: returns YES
    - MULTIPLE_CHOICE: returns the first option
    - FREEFORM: returns the question default (empty when there is none)
    """

    def ask(self, question: Question) -> Answer:
        if question.type == QuestionType.YES_NO:
            return Answer(value=AnswerValue.YES, text="YES")

        if question.type == QuestionType.MULTIPLE_CHOICE and question.options:
            first = question.options[0]
            return Answer(value=first.key, selected_option=first, text=first.label)

        text = question.default or ""
        return Answer(value=text, text=text)
