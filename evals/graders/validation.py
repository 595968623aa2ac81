from opik.evaluation.metrics import BaseMetric
from opik.evaluation.metrics.score_result import ScoreResult


class MissingFieldsCorrectness(BaseMetric):
    """Checks that unrecoverable fields were flagged, and nothing else."""
    name = "missing_fields_correctness"

    def score(self, missing_fields: list[str], expected_missing_fields: list[str], **kwargs) -> ScoreResult:
        expected_set = set(expected_missing_fields)
        actual_set = set(missing_fields)

        if not expected_set and not actual_set:
            return ScoreResult(value=1.0, name=self.name, reason="No missing fields expected or found")

        hits = len(expected_set & actual_set)
        precision = hits / len(actual_set) if actual_set else 0.0
        recall = hits / len(expected_set) if expected_set else 0.0
        f1 = 2 * precision * recall / (precision + recall) if (precision + recall) > 0 else 0.0

        return ScoreResult(
            value=f1,
            name=self.name,
            reason=f"P={precision:.2f} R={recall:.2f} F1={f1:.2f}. Expected: {sorted(expected_set)}, Got: {sorted(actual_set)}",
        )
