"""ConsoleInterviewer: prompts the user at the terminal."""

from __future__ import annotations

import click

from stylesweep.model.question import Answer, AnswerValue, Question, QuestionType


class ConsoleInterviewer:
    """Interviewer that reads answers from stdin.

    Yes/no prompts accept ``y``/``yes`` and ``n``/``no`` (anything else is
    a no); an empty reply falls back to the question default. End of input
    counts as a skipped answer.
    """

    def ask(self, question: Question) -> Answer:
        if question.type == QuestionType.YES_NO:
            return self._ask_yes_no(question)
        if question.type == QuestionType.MULTIPLE_CHOICE:
            return self._ask_multiple_choice(question)
        return self._ask_freeform(question)

    def _ask_yes_no(self, question: Question) -> Answer:
        raw = self._get_input(f"\n{question.text} (yes/no): ")
        if raw is None:
            return Answer(value=AnswerValue.SKIPPED, text="")
        raw = raw.strip().lower()
        if not raw and question.default:
            raw = question.default.lower()
        if raw in ("y", "yes"):
            return Answer(value=AnswerValue.YES, text="YES")
        if raw in ("n", "no"):
            return Answer(value=AnswerValue.NO, text="NO")
        if not raw:
            return Answer(value=AnswerValue.SKIPPED, text="")
        return Answer(value=AnswerValue.NO, text=raw)

    def _ask_multiple_choice(self, question: Question) -> Answer:
        click.echo(f"\n{question.text}")
        for opt in question.options:
            click.echo(f"   {opt.key}) {opt.label}")
        raw = self._get_input(f"\nChoose ({' or '.join(o.key for o in question.options)}): ")
        if raw is None:
            return Answer(value=AnswerValue.SKIPPED, text="")
        raw = raw.strip() or (question.default or "")
        for opt in question.options:
            if raw == opt.key or raw.lower() == opt.label.strip().lower():
                return Answer(value=opt.key, selected_option=opt, text=opt.label)
        return Answer(value=raw, text=raw)

    def _ask_freeform(self, question: Question) -> Answer:
        raw = self._get_input(f"\n{question.text} ")
        if raw is None:
            return Answer(value=AnswerValue.SKIPPED, text="")
        raw = raw.strip()
        if not raw and question.default:
            raw = question.default
        return Answer(value=raw, text=raw)

    @staticmethod
    def _get_input(prompt: str) -> str | None:
        """Read one line; None at end of input."""
        click.echo(prompt, nl=False)
        try:
            return input()
        except EOFError:
            return None
