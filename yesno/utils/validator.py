"""Dialogue document validation — structural checks before a tree is built.

Returns a list of issues. If empty, the document describes a finite
dialogue that parse_dialogue can turn into Ask/Stop nodes.
"""

import sys

ASK_KEYS = {"ask", "on_yes", "on_no"}
STOP_KEYS = {"stop"}

_ENTER = "enter"
_EXIT = "exit"


def _type_name(value) -> str:
    return type(value).__name__


def _format_path(path) -> str:
    """Render a (parent, branch) chain as "root.on_yes.on_no"."""
    parts = []
    while path is not None:
        path, branch = path
        parts.append(branch)
    return ".".join(["root", *reversed(parts)])


def check_dialogue_document(data) -> list[str]:
    """Check whether ``data`` (e.g. from yaml.safe_load) is a valid dialogue document.

    Every node is a mapping with either a ``stop`` conclusion, or an ``ask``
    question plus ``on_yes`` and ``on_no`` child nodes. Cycles created through
    YAML aliases are reported. Unknown keys only produce a warning.

    Walks the document with an explicit stack, so nesting depth is unbounded.
    Returns a list of issue strings. Empty list = valid.
    """
    issues = []
    in_stack = set()

    def _check_text(value, path, field):
        if not isinstance(value, str):
            issues.append(
                f"{_format_path(path)}: {field} must be a string, got {_type_name(value)} "
                f"(quote values such as 'yes', 'no' or numbers)."
            )

    def _warn_unknown(node, allowed, path):
        unknown = set(node) - allowed
        if unknown:
            print(
                f"[yesno] Warning: {_format_path(path)}: ignoring unknown keys "
                f"{sorted(map(str, unknown))}.",
                file=sys.stderr,
            )

    stack = [(_ENTER, data, None)]
    while stack:
        action, node, path = stack.pop()
        if action == _EXIT:
            in_stack.discard(id(node))
            continue

        if not isinstance(node, dict):
            issues.append(
                f"{_format_path(path)}: expected a mapping with 'ask' or 'stop', "
                f"got {_type_name(node)}."
            )
            continue
        if id(node) in in_stack:
            issues.append(f"{_format_path(path)}: circular reference to an enclosing node.")
            continue

        has_ask = "ask" in node
        has_stop = "stop" in node
        if has_ask == has_stop:
            issues.append(f"{_format_path(path)}: node must have exactly one of 'ask' or 'stop'.")
            continue

        if has_stop:
            _check_text(node["stop"], path, "conclusion")
            _warn_unknown(node, STOP_KEYS, path)
            continue

        _check_text(node["ask"], path, "question")
        _warn_unknown(node, ASK_KEYS, path)
        in_stack.add(id(node))
        stack.append((_EXIT, node, path))
        children = []
        for branch in ("on_yes", "on_no"):
            if branch not in node:
                hint = ""
                # Unquoted yes:/no: keys load as booleans
                if True in node or False in node:
                    hint = " (bare 'yes'/'no' keys are read as booleans; use 'on_yes'/'on_no')"
                issues.append(f"{_format_path(path)}: missing '{branch}'{hint}.")
                continue
            children.append((_ENTER, node[branch], (path, branch)))
        # Reversed so on_yes is checked before on_no
        stack.extend(reversed(children))

    return issues
