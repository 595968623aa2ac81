from src.nodes.base import AbstractBlockNode
from src.core.capture_state import CaptureState
from src.core.patterns import clean_name, find_phone, strip_label


class RecipientNode(AbstractBlockNode):
    name = "recipient"
    block_index = 0

    def __call__(self, state: CaptureState) -> dict:
        block = self.block(state)
        if block is None:
            return {**self.merge(state, {}, ["recipient_phone"]), "trajectory": self.visited(state)}

        text = strip_label(block, self.labels)
        fields = {}
        missing = []

        phone, text = find_phone(text)
        if phone:
            fields["recipient_phone"] = phone
        else:
            missing.append("recipient_phone")

        name = clean_name(text)
        if name:
            fields["recipient_name"] = name

        return {**self.merge(state, fields, missing), "trajectory": self.visited(state)}
