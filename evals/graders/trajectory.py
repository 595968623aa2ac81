from opik.evaluation.metrics import BaseMetric
from opik.evaluation.metrics.score_result import ScoreResult


class TrajectoryCorrectness(BaseMetric):
    """Checks the capture graph visited the expected nodes, in order.

    A stale date should route check_date straight to report.
    """
    name = "trajectory_correctness"

    def score(self, trajectory: list[str], expected_trajectory: list[str], **kwargs) -> ScoreResult:
        if trajectory == expected_trajectory:
            return ScoreResult(value=1.0, name=self.name, reason=f"Visited {trajectory}")

        diverged_at = next(
            (i for i, (a, b) in enumerate(zip(trajectory, expected_trajectory)) if a != b),
            min(len(trajectory), len(expected_trajectory)),
        )
        return ScoreResult(
            value=0.0,
            name=self.name,
            reason=f"Diverged at step {diverged_at}: expected {expected_trajectory}, got {trajectory}",
        )
