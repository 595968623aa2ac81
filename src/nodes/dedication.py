from src.nodes.base import AbstractBlockNode
from src.core.capture_state import CaptureState
from src.core.patterns import strip_label


class DedicationNode(AbstractBlockNode):
    name = "dedication"
    block_index = 3

    def __call__(self, state: CaptureState) -> dict:
        block = self.block(state)
        fields = {}
        if block is not None:
            dedication = strip_label(block, self.labels).strip()
            if dedication:
                fields["dedication"] = dedication

        return {**self.merge(state, fields, []), "trajectory": self.visited(state)}
