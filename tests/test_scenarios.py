"""Runs the eval scenarios through the capture graph without Opik."""
import pytest

from evals.run_eval import load_scenarios
from src.config import AppConfig
from src.builder import CaptureBuilder

SCENARIOS = load_scenarios()


@pytest.fixture(scope="module")
def parser():
    return CaptureBuilder(AppConfig.for_eval()).build()


def test_scenarios_loaded():
    assert {s["category"] for s in SCENARIOS} >= {"happy_path", "stale_date", "missing_fields", "labeled"}


@pytest.mark.parametrize("scenario", SCENARIOS, ids=[s["id"] for s in SCENARIOS])
def test_scenario(parser, scenario):
    graph = parser.graph(scenario["input"].get("format"))
    state = graph.invoke({
        "raw_text": scenario["input"]["text"],
        "today": scenario["input"]["today"],
        "trajectory": [],
    })
    result = state["result"]
    expected = scenario["expected"]

    assert result.aborted is expected["aborted"]
    assert result.fields.model_dump(exclude_none=True) == expected["fields"]
    assert sorted(result.missing_fields) == sorted(expected["missing_fields"])
    assert state["trajectory"] == expected["expected_trajectory"]
