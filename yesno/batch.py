"""Batch evaluation — run a dialogue against pre-recorded answers, no console."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from yesno.answers import REPROMPT
from yesno.dialogue import Dialogue
from yesno.graph import interpret
from yesno.line_io import ScriptedLineIO


@dataclass(frozen=True)
class Evaluation:
    conclusion: str
    answers: tuple[bool, ...]  # Accepted answers along the path taken.
    transcript: tuple[str, ...]  # Every line written: questions, re-prompts, conclusion.


def evaluate(dialogue: Dialogue, answers: str | Iterable[str], reprompt: str = REPROMPT) -> Evaluation:
    """Evaluate ``dialogue`` as if ``answers`` had been typed at the console.

    ``answers`` is a sequence of input lines, or a single string that is split
    into lines. Invalid lines are re-prompted exactly as in an interactive run;
    surplus lines are ignored. Raises DialogueIOError if the answers run out
    before a conclusion is reached.
    """
    if isinstance(answers, str):
        answers = answers.splitlines()
    io = ScriptedLineIO(answers)
    final_state = interpret(dialogue, io, reprompt=reprompt)
    return Evaluation(
        conclusion=final_state["conclusion"],
        answers=tuple(final_state["answers"]),
        transcript=tuple(io.written),
    )
