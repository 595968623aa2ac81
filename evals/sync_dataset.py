"""Sync local JSON scenarios to Opik datasets."""
import json
from pathlib import Path
from opik import Opik

SCENARIOS_DIR = Path("evals/scenarios")


def sync():
    client = Opik()
    all_scenarios = []

    for path in sorted(SCENARIOS_DIR.glob("*.json")):
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        all_scenarios.extend(data["scenarios"])

    # Opik requires 'id' to be a UUID; keep ours as 'scenario_id'
    items = []
    for s in all_scenarios:
        item = {**s}
        item["scenario_id"] = item.pop("id", None)
        items.append(item)

    dataset = client.get_or_create_dataset("capture-scenarios-all")
    dataset.insert(items)
    print(f"Synced {len(items)} scenarios to Opik dataset 'capture-scenarios-all'")

    for cat in sorted(set(s["category"] for s in items)):
        cat_items = [s for s in items if s["category"] == cat]
        ds = client.get_or_create_dataset(f"capture-scenarios-{cat}")
        ds.insert(cat_items)
        print(f"  Synced {len(cat_items)} scenarios to 'capture-scenarios-{cat}'")


if __name__ == "__main__":
    sync()
