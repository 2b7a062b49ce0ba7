"""Entry point: loads a dialogue, greets the user, runs the dialogue on the console."""

import sys
from pathlib import Path

from yesno.answers import REPROMPT
from yesno.config import get_config
from yesno.dialogue import EXAMPLE_DIALOGUE, FAREWELL, GREETING, Dialogue, greet_first
from yesno.graph import run
from yesno.line_io import ConsoleIO, DialogueIOError, LineIO
from yesno.utils.formatter import render_outline
from yesno.utils.parsing import load_dialogue

NAME_PROMPT = "What is your name?"

USAGE = "usage: yesno [DIALOGUE_FILE] [--no-greeting] [--outline]"


def run_with_greeting(dialogue: Dialogue, io: LineIO) -> str:
    """Ask for the user's name, then run the dialogue wrapped in a greeting.

    Returns the conclusion that was written. I/O errors propagate.
    """
    config = get_config()
    io.write_line(config.get("name_prompt", NAME_PROMPT))
    name = io.read_line()
    greeted = greet_first(
        dialogue,
        name,
        greeting=config.get("greeting", GREETING),
        farewell=config.get("farewell", FAREWELL),
    )
    return run(greeted, io, reprompt=config.get("reprompt", REPROMPT))


def main() -> None:
    """CLI entry point — runs the bundled example or a YAML dialogue file."""
    greet = True
    outline = False
    args = sys.argv[1:]

    if "--no-greeting" in args:
        greet = False
        args.remove("--no-greeting")
    if "--outline" in args:
        outline = True
        args.remove("--outline")

    if len(args) > 1 or any(arg.startswith("-") for arg in args):
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    if args:
        try:
            dialogue = load_dialogue(args[0])
        except (OSError, ValueError) as exc:
            print(f"[yesno] Cannot load dialogue from {args[0]}: {exc}", file=sys.stderr)
            sys.exit(2)
        title = Path(args[0]).stem
    else:
        dialogue = EXAMPLE_DIALOGUE
        title = "Example dialogue"

    if outline:
        print(render_outline(dialogue, title=title))
        return

    io = ConsoleIO()
    try:
        if greet:
            run_with_greeting(dialogue, io)
        else:
            run(dialogue, io)
    except DialogueIOError as exc:
        print(f"[yesno] I/O error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
