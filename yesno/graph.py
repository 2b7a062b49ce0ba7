"""LangGraph StateGraph definition for the dialogue interpreter.

The graph has two nodes: ``ask`` poses the current question and moves to
the chosen branch, ``stop`` writes the conclusion and ends the run. The
Line I/O for the run travels in ``config["configurable"]``.
"""

from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, StateGraph

from yesno.answers import REPROMPT, ask_boolean_question
from yesno.config import get_config
from yesno.dialogue import Ask, Dialogue, depth
from yesno.line_io import LineIO
from yesno.state import DialogueState, initial_state

# LangGraph's own default; deeper dialogues raise the limit per run.
_DEFAULT_RECURSION_LIMIT = 25


def _route(state: DialogueState) -> str:
    """Conditional edge: pick the node matching the current dialogue step."""
    return "ask" if isinstance(state["dialogue"], Ask) else "stop"


def _io_settings(config: RunnableConfig) -> tuple[LineIO, str]:
    configurable = config["configurable"]
    return configurable["io"], configurable.get("reprompt", REPROMPT)


def _ask_node(state: DialogueState, config: RunnableConfig) -> dict:
    """Ask the current question and descend into the answered branch."""
    io, reprompt = _io_settings(config)
    node = state["dialogue"]
    answer = ask_boolean_question(io, node.question, reprompt=reprompt)
    return {
        "dialogue": node.yes if answer else node.no,
        "answers": state["answers"] + [answer],
    }


def _stop_node(state: DialogueState, config: RunnableConfig) -> dict:
    """Write the conclusion. This is the only terminal action of a run."""
    io, _ = _io_settings(config)
    conclusion = state["dialogue"].conclusion
    io.write_line(conclusion)
    return {"conclusion": conclusion}


# --- Build the graph ---

workflow = StateGraph(DialogueState)

workflow.add_node("ask", _ask_node)
workflow.add_node("stop", _stop_node)

workflow.add_conditional_edges(START, _route, {"ask": "ask", "stop": "stop"})
workflow.add_conditional_edges("ask", _route, {"ask": "ask", "stop": "stop"})
workflow.add_edge("stop", END)

graph = workflow.compile()


def _run_config(dialogue: Dialogue, io: LineIO, reprompt: str | None) -> RunnableConfig:
    if reprompt is None:
        reprompt = get_config().get("reprompt", REPROMPT)
    return {
        "configurable": {"io": io, "reprompt": reprompt},
        "recursion_limit": max(_DEFAULT_RECURSION_LIMIT, depth(dialogue) + 1),
    }


def interpret(dialogue: Dialogue, io: LineIO, reprompt: str | None = None) -> DialogueState:
    """Invoke the compiled graph on ``dialogue`` and return the final state."""
    return graph.invoke(initial_state(dialogue), config=_run_config(dialogue, io, reprompt))


def run(dialogue: Dialogue, io: LineIO, reprompt: str | None = None) -> str:
    """Walk ``dialogue`` from the root to a Stop, asking each question on ``io``.

    Returns the conclusion that was written. Errors raised by ``io`` propagate
    unchanged and abandon the walk; lines already written stay written.
    """
    return interpret(dialogue, io, reprompt)["conclusion"]


# --- Step-execution helper for manual stepping ---

_NODE_FNS = {
    "ask": _ask_node,
    "stop": _stop_node,
}


def run_single_step(state: DialogueState, io: LineIO, reprompt: str | None = None) -> DialogueState:
    """Run a single interpreter step and return the updated state.

    One step is either one answered question or the final conclusion.
    Raises ValueError if the state has already reached its conclusion.
    """
    if state["conclusion"] is not None:
        raise ValueError("Dialogue has already concluded.")
    node_fn = _NODE_FNS[_route(state)]
    updates = node_fn(state, _run_config(state["dialogue"], io, reprompt))
    return {**state, **updates}
