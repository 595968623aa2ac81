import opik

from src.nodes.base import BaseNode
from src.core.capture import CapturedOrderFields, ParseResult
from src.core.capture_state import CaptureState


class ReportNode(BaseNode):
    name = "report"

    @opik.track(name="report_node")
    def __call__(self, state: CaptureState) -> dict:
        if state.get("aborted"):
            result = ParseResult.stale(state.get("abort_reason") or "Delivery date is in the past")
        else:
            result = ParseResult(
                fields=CapturedOrderFields(**state.get("fields", {})),
                missing_fields=set(state.get("missing_fields", [])),
            )

        return {
            "result": result,
            "trajectory": state.get("trajectory", []) + ["report"],
        }
