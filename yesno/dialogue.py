"""Dialogue model — an immutable binary tree of yes/no questions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

GREETING = "Welcome {name}, are you ready to continue?"
FAREWELL = "See you later {name}."


@dataclass(frozen=True)
class Stop:
    """Terminal step: the conclusion shown when the conversation ends."""

    conclusion: str


@dataclass(frozen=True)
class Ask:
    """A binary decision step consisting of a question and two possible branches."""

    question: str
    yes: Dialogue
    no: Dialogue

    def __post_init__(self) -> None:
        for branch in ("yes", "no"):
            child = getattr(self, branch)
            if not isinstance(child, (Ask, Stop)):
                raise TypeError(
                    f"Ask.{branch} must be an Ask or Stop node, got {type(child).__name__}."
                )


Dialogue = Union[Ask, Stop]


def greet_first(
    dialogue: Dialogue,
    name: str,
    *,
    greeting: str = GREETING,
    farewell: str = FAREWELL,
) -> Ask:
    """Wrap a dialogue in a personalized "ready to continue?" question.

    Answering yes continues with the original dialogue untouched; answering no
    ends the conversation with a farewell addressed to ``name``.
    """
    return Ask(
        question=greeting.format(name=name),
        yes=dialogue,
        no=Stop(farewell.format(name=name)),
    )


def depth(dialogue: Dialogue) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack = [(dialogue, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Ask):
            stack.append((node.yes, level + 1))
            stack.append((node.no, level + 1))
        else:
            deepest = max(deepest, level)
    return deepest


EXAMPLE_DIALOGUE = Ask(
    "Do you know Python?",
    Ask("Do you like it?", Stop("Good!"), Stop("I can't believe it!")),
    Stop("What a pity!"),
)
