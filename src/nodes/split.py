from src.nodes.base import BaseNode
from src.core.capture_state import CaptureState
from src.core.patterns import NUMBERED_MARKER, LABELED_MARKER, LABELED_MARKERS

BLOCK_COUNT = 4
CAPTURE_FORMATS = ("numbered", "labeled")
ADDRESS_BLOCK = 2


def split_numbered(raw_text: str) -> list[str | None]:
    """Split on keycap markers; text before the first marker is dropped.

    Blocks are taken positionally: the segment after the first marker is the
    recipient block, the second the delivery block, and so on.
    """
    parts = NUMBERED_MARKER.split(raw_text)[1:]
    blocks: list[str | None] = list(parts[:BLOCK_COUNT])
    return blocks + [None] * (BLOCK_COUNT - len(blocks))


def split_labeled(raw_text: str) -> list[str | None]:
    """Split on "Destinatario:", "Entrega:", "Dirección:", "Tarjeta:" lines.

    Each block runs until the next label line. The keyword and its colon are
    not part of the block, except for the address block: the address node
    drops everything up to its first label colon, so "Dirección:" is kept for
    it to remove. A repeated keyword keeps its first occurrence.
    """
    order = [label.lower() for label in LABELED_MARKERS]
    blocks: list[str | None] = [None] * BLOCK_COUNT
    matches = list(LABELED_MARKER.finditer(raw_text))
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(raw_text)
        index = order.index(match.group(1).lower())
        if blocks[index] is None:
            start = match.start(1) if index == ADDRESS_BLOCK else match.end()
            blocks[index] = raw_text[start:end]
    return blocks


class SplitNode(BaseNode):
    name = "split"

    def __init__(self, capture_format: str = "numbered"):
        if capture_format not in CAPTURE_FORMATS:
            raise ValueError(f"Unknown capture format: {capture_format}")
        self.capture_format = capture_format

    def __call__(self, state: CaptureState) -> dict:
        raw_text = state.get("raw_text") or ""
        if self.capture_format == "labeled":
            blocks = split_labeled(raw_text)
        else:
            blocks = split_numbered(raw_text)

        return {
            "blocks": blocks,
            "fields": {},
            "missing_fields": [],
            "aborted": False,
            "abort_reason": None,
            "trajectory": state.get("trajectory", []) + ["split"],
        }
