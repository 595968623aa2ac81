from abc import ABC, abstractmethod
from src.core.capture_state import CaptureState


class BaseNode(ABC):
    """Base class for all capture workflow nodes.

    Subclasses must set `name` as a class variable (str) and implement `__call__`.
    """

    name: str  # Class variable, set by each subclass (e.g. name = "recipient")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not getattr(cls, 'name', None) and 'Abstract' not in cls.__name__:
            raise TypeError(f"{cls.__name__} must define a 'name' class variable")

    @abstractmethod
    def __call__(self, state: CaptureState) -> dict:
        """Execute node logic. Returns a dict that updates the state."""
        ...


class AbstractBlockNode(BaseNode):
    """Node that reads one of the four split blocks.

    `block_index` selects the block; `labels` are the leading phrases to
    strip before extraction.
    """

    block_index: int

    def __init__(self, labels: list[str] | None = None):
        self.labels = labels or []

    def block(self, state: CaptureState) -> str | None:
        blocks = state.get("blocks") or []
        if self.block_index < len(blocks):
            return blocks[self.block_index]
        return None

    def visited(self, state: CaptureState) -> list[str]:
        return state.get("trajectory", []) + [self.name]

    @staticmethod
    def merge(state: CaptureState, fields: dict[str, str], missing: list[str]) -> dict:
        return {
            "fields": {**state.get("fields", {}), **fields},
            "missing_fields": state.get("missing_fields", []) + missing,
        }
