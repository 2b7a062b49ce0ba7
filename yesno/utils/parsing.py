"""Dialogue documents: YAML <-> Ask/Stop trees."""

from pathlib import Path

import yaml

from yesno.dialogue import Ask, Dialogue, Stop
from yesno.utils.validator import check_dialogue_document


def _build(document: dict) -> Dialogue:
    """Build nodes bottom-up with an explicit stack; children are finished first."""
    built: list[Dialogue] = []
    stack = [(False, document)]
    while stack:
        children_done, node = stack.pop()
        if "stop" in node:
            built.append(Stop(node["stop"]))
        elif children_done:
            no = built.pop()
            yes = built.pop()
            built.append(Ask(node["ask"], yes, no))
        else:
            stack.append((True, node))
            stack.append((False, node["on_no"]))
            stack.append((False, node["on_yes"]))
    return built.pop()


def parse_dialogue(data) -> Dialogue:
    """Build a Dialogue from a parsed document.

    Raises ValueError listing every structural issue if the document is invalid.
    Aliased sub-documents are built into separate nodes.
    """
    issues = check_dialogue_document(data)
    if issues:
        raise ValueError("Invalid dialogue document:\n" + "\n".join(f"- {issue}" for issue in issues))
    return _build(data)


def load_dialogue(path: str | Path) -> Dialogue:
    """Read and parse a YAML dialogue document.

    OSError from reading the file propagates; malformed YAML is a ValueError.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    return parse_dialogue(data)


def to_document(dialogue: Dialogue) -> dict:
    """Convert a Dialogue into its document form (plain dicts)."""
    root: dict = {}
    stack = [(dialogue, root)]
    while stack:
        node, doc = stack.pop()
        if isinstance(node, Stop):
            doc["stop"] = node.conclusion
            continue
        yes_doc: dict = {}
        no_doc: dict = {}
        doc.update({"ask": node.question, "on_yes": yes_doc, "on_no": no_doc})
        stack.append((node.yes, yes_doc))
        stack.append((node.no, no_doc))
    return root


def dump_dialogue(dialogue: Dialogue) -> str:
    """Serialize a Dialogue as a YAML document."""
    return yaml.safe_dump(to_document(dialogue), sort_keys=False, allow_unicode=True)
