from src.nodes.base import AbstractBlockNode
from src.core.capture_state import CaptureState
from src.core.patterns import after_label_colon, collapse_whitespace, find_gps_url


class AddressNode(AbstractBlockNode):
    name = "address"
    block_index = 2

    def __call__(self, state: CaptureState) -> dict:
        block = self.block(state)
        if block is None:
            return {**self.merge(state, {}, ["recipient_address"]), "trajectory": self.visited(state)}

        # Any "Label:" prefix is dropped, known or not.
        text = after_label_colon(block)
        fields = {}
        missing = []

        gps_url, text = find_gps_url(text)
        if gps_url:
            fields["gps_url"] = gps_url

        address = collapse_whitespace(text)
        if address:
            fields["recipient_address"] = address
        else:
            missing.append("recipient_address")

        return {**self.merge(state, fields, missing), "trajectory": self.visited(state)}
