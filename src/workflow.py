"""LangGraph workflow definition for quick capture.

Defines the graph structure: nodes, edges, and conditional routing.
"""
from langgraph.graph import StateGraph, END

from src.core.capture_state import CaptureState
from src.nodes.split import SplitNode
from src.nodes.check_date import CheckDateNode
from src.nodes.recipient import RecipientNode
from src.nodes.delivery import DeliveryNode
from src.nodes.address import AddressNode
from src.nodes.dedication import DedicationNode
from src.nodes.report import ReportNode


def should_continue_after_check_date(state: CaptureState) -> str:
    """Route after the date pre-pass: extract blocks or stop on a stale date."""
    if state.get("aborted", False):
        return "report"
    return "recipient"


def build_graph(
    split_node: SplitNode,
    check_date_node: CheckDateNode,
    recipient_node: RecipientNode,
    delivery_node: DeliveryNode,
    address_node: AddressNode,
    dedication_node: DedicationNode,
    report_node: ReportNode,
):
    """Build and compile the capture graph.

    Graph structure:
        split → check_date → (stale?) → recipient → delivery → address → dedication → report
                           ↘ (stale) → report

    Returns a compiled LangGraph that can be invoked with a CaptureState.
    """
    graph = StateGraph(CaptureState)

    graph.add_node("split", split_node)
    graph.add_node("check_date", check_date_node)
    graph.add_node("recipient", recipient_node)
    graph.add_node("delivery", delivery_node)
    graph.add_node("address", address_node)
    graph.add_node("dedication", dedication_node)
    graph.add_node("report", report_node)

    graph.set_entry_point("split")
    graph.add_edge("split", "check_date")

    # Conditional: a past delivery date skips every block node
    graph.add_conditional_edges(
        "check_date",
        should_continue_after_check_date,
        {"recipient": "recipient", "report": "report"},
    )

    graph.add_edge("recipient", "delivery")
    graph.add_edge("delivery", "address")
    graph.add_edge("address", "dedication")
    graph.add_edge("dedication", "report")
    graph.add_edge("report", END)

    return graph.compile()
