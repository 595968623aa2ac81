import opik

from src.nodes.base import AbstractBlockNode
from src.core.capture_state import CaptureState
from src.core.patterns import find_date, strip_label


class CheckDateNode(AbstractBlockNode):
    """Date pre-pass: reads the delivery date before any field is assigned.

    A date earlier than `today` aborts the capture. Both values are
    YYYY-MM-DD, so string comparison is chronological.
    """
    name = "check_date"
    block_index = 1

    @opik.track(name="check_date_node")
    def __call__(self, state: CaptureState) -> dict:
        block = self.block(state)
        delivery_date = None
        if block is not None:
            delivery_date, _ = find_date(strip_label(block, self.labels))

        today = state.get("today", "")
        if delivery_date is not None and delivery_date < today:
            return {
                "delivery_date": delivery_date,
                "aborted": True,
                "abort_reason": f"Delivery date {delivery_date} is before today ({today})",
                "trajectory": self.visited(state),
            }

        return {
            "delivery_date": delivery_date,
            "aborted": False,
            "trajectory": self.visited(state),
        }
