"""Outline formatter — renders a dialogue tree as a Markdown nested list."""

from yesno.dialogue import Ask, Dialogue


def render_outline(dialogue: Dialogue, title: str = "") -> str:
    """Render every question and conclusion, yes-branch first.

    Conclusions are bold so the leaves stand out from the questions.
    """
    lines = []
    if title:
        lines.append(f"# {title}")
        lines.append("")

    stack = [(dialogue, 0, "")]
    while stack:
        node, level, label = stack.pop()
        indent = "  " * level
        if isinstance(node, Ask):
            lines.append(f"{indent}- {label}{node.question}")
            # Pushed in reverse so the yes-branch is rendered first
            stack.append((node.no, level + 1, "no: "))
            stack.append((node.yes, level + 1, "yes: "))
        else:
            lines.append(f"{indent}- {label}**{node.conclusion}**")

    return "\n".join(lines)
