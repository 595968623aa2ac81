from opik.evaluation.metrics import BaseMetric
from opik.evaluation.metrics.score_result import ScoreResult


class AbortCorrectness(BaseMetric):
    """Evaluates whether a stale delivery date aborted the capture, and only then."""
    name = "abort_correctness"

    def score(self, aborted: bool, expected_aborted: bool, fields: dict | None = None, **kwargs) -> ScoreResult:
        if aborted != expected_aborted:
            return ScoreResult(
                value=0.0,
                name=self.name,
                reason=f"Expected aborted={expected_aborted}, got {aborted}",
            )
        if aborted and fields:
            return ScoreResult(
                value=0.0,
                name=self.name,
                reason=f"Aborted capture still filled fields: {sorted(fields)}",
            )
        return ScoreResult(value=1.0, name=self.name, reason=f"aborted={aborted} as expected")
