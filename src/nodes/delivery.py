from src.nodes.base import AbstractBlockNode
from src.core.capture_state import CaptureState
from src.core.patterns import collapse_whitespace, find_date, strip_label


class DeliveryNode(AbstractBlockNode):
    """Assigns delivery_date and delivery_time.

    Runs after CheckDateNode, so a date found here is never in the past.
    Whatever is left once the date is removed is kept as free-text time.
    """
    name = "delivery"
    block_index = 1

    def __call__(self, state: CaptureState) -> dict:
        block = self.block(state)
        if block is None:
            return {**self.merge(state, {}, ["delivery_date"]), "trajectory": self.visited(state)}

        fields = {}
        missing = []

        delivery_date, rest = find_date(strip_label(block, self.labels))
        if delivery_date:
            fields["delivery_date"] = delivery_date
        else:
            missing.append("delivery_date")

        delivery_time = collapse_whitespace(rest)
        if delivery_time:
            fields["delivery_time"] = delivery_time

        return {**self.merge(state, fields, missing), "trajectory": self.visited(state)}
