"""Dialogue run state — passed through the interpreter graph."""

from typing import TypedDict

from yesno.dialogue import Dialogue


class DialogueState(TypedDict):
    dialogue: Dialogue  # Node currently being interpreted.
    answers: list[bool]  # Accepted answers so far, in order.
    conclusion: str | None  # Set once a Stop node has been reached.


def initial_state(dialogue: Dialogue) -> DialogueState:
    return {"dialogue": dialogue, "answers": [], "conclusion": None}
