"""QuickCaptureParser: turns a pasted delivery message into a ParseResult."""
import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import opik

from src.core.capture import ParseResult
from src.nodes.split import SplitNode, CAPTURE_FORMATS
from src.nodes.check_date import CheckDateNode
from src.nodes.recipient import RecipientNode
from src.nodes.delivery import DeliveryNode
from src.nodes.address import AddressNode
from src.nodes.dedication import DedicationNode
from src.nodes.report import ReportNode
from src.workflow import build_graph

logger = logging.getLogger("quick_capture.parser")


def _resolve_zone(timezone: str) -> ZoneInfo | None:
    if not timezone:
        return None
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {timezone}") from e


class QuickCaptureParser:
    """Parses pasted order text with a compiled capture graph per format.

    `labels` maps block names ("recipient", "delivery", "dedication") to the
    leading phrases stripped from those blocks. The parser keeps no state
    between calls.
    """

    def __init__(
        self,
        capture_format: str = "numbered",
        labels: dict[str, list[str]] | None = None,
        timezone: str = "",
    ):
        if capture_format not in CAPTURE_FORMATS:
            raise ValueError(f"Unknown capture format: {capture_format}")
        self.capture_format = capture_format
        self.labels = labels or {}
        self.timezone = timezone
        self._zone = _resolve_zone(timezone)
        self._graphs = {}

    def graph(self, capture_format: str | None = None):
        """Return the compiled graph for a format, building it on first use."""
        capture_format = capture_format or self.capture_format
        if capture_format not in self._graphs:
            self._graphs[capture_format] = build_graph(
                SplitNode(capture_format),
                CheckDateNode(self.labels.get("delivery")),
                RecipientNode(self.labels.get("recipient")),
                DeliveryNode(self.labels.get("delivery")),
                AddressNode(),
                DedicationNode(self.labels.get("dedication")),
                ReportNode(),
            )
        return self._graphs[capture_format]

    def today(self) -> str:
        if self._zone:
            return datetime.now(self._zone).date().isoformat()
        return date.today().isoformat()

    @opik.track(name="quick_capture")
    def parse(
        self,
        raw_text: str,
        today: str | date | None = None,
        capture_format: str | None = None,
    ) -> ParseResult:
        if isinstance(today, datetime):
            today = today.date()
        if isinstance(today, date):
            today = today.isoformat()
        today = (today or self.today()).strip()

        state = self.graph(capture_format).invoke({
            "raw_text": raw_text or "",
            "today": today,
            "trajectory": [],
        })
        result = state["result"]

        if result.aborted:
            logger.warning(f"Capture aborted: {result.abort_reason}")
        else:
            logger.info(f"Capture parsed: missing={sorted(result.missing_fields)}")
        return result
