"""Boolean-answer protocol: turn free-text lines into a validated yes/no."""

from tenacity import retry, retry_if_exception_type, stop_never, wait_none

from yesno.line_io import LineIO

REPROMPT = "Please type 'y' or 'n'"


class _InvalidAnswer(Exception):
    """Raised inside the retry loop when a line is neither 'y' nor 'n'."""


def make_bool(line: str) -> bool | None:
    """Classify one input line.

    Exactly "y" is True and exactly "n" is False. Anything else, including
    "Y", "yes" or " y", is not an answer and yields None.
    """
    if line == "y":
        return True
    if line == "n":
        return False
    return None


def read_validated_boolean(io: LineIO, reprompt: str = REPROMPT) -> bool:
    """Read lines until one is a valid answer, re-prompting after each invalid one.

    There is no attempt limit. Only _InvalidAnswer is retried: any error raised
    by ``io`` (read or re-prompt write) propagates on the spot.
    """

    @retry(
        retry=retry_if_exception_type(_InvalidAnswer),
        stop=stop_never,
        wait=wait_none(),
        reraise=True,
    )
    def _read() -> bool:
        line = io.read_line()
        answer = make_bool(line)
        if answer is None:
            io.write_line(reprompt)
            raise _InvalidAnswer(line)
        return answer

    return _read()


def ask_boolean_question(io: LineIO, question: str, reprompt: str = REPROMPT) -> bool:
    """Write the question, then read a validated yes/no answer."""
    io.write_line(question)
    return read_validated_boolean(io, reprompt=reprompt)
