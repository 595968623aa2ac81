from opik.evaluation.metrics import BaseMetric
from opik.evaluation.metrics.score_result import ScoreResult


CAPTURE_FIELDS = [
    "recipient_name", "recipient_phone", "recipient_address", "gps_url",
    "delivery_date", "delivery_time", "dedication",
]


class FieldAccuracy(BaseMetric):
    """Field-level capture accuracy. A field expected absent must be absent."""
    name = "field_accuracy"

    def score(self, fields: dict | None, expected_fields: dict | None, **kwargs) -> ScoreResult:
        fields = fields or {}
        expected_fields = expected_fields or {}

        correct = 0
        mismatches = []
        for field in CAPTURE_FIELDS:
            expected = expected_fields.get(field)
            actual = fields.get(field)
            if self._normalize(actual) == self._normalize(expected):
                correct += 1
            else:
                mismatches.append(f"{field}: expected '{expected}', got '{actual}'")

        total = len(CAPTURE_FIELDS)
        return ScoreResult(
            value=correct / total,
            name=self.name,
            reason=f"{correct}/{total} fields correct. Mismatches: {mismatches}" if mismatches else f"{correct}/{total} fields correct",
        )

    @staticmethod
    def _normalize(value: str | None) -> str | None:
        """Normalize for comparison: collapse and strip whitespace."""
        if value is None:
            return None
        return " ".join(str(value).split())
