"""Demo script for productivity-insights."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from productivity_insights.adapters.json_adapter import parse
from productivity_insights.engine import generate_insights


def main() -> None:
    dataset = parse("examples/sample_dataset.json")
    insights = generate_insights(dataset, now=datetime.fromisoformat("2025-03-12T17:00:00"))
    for insight in insights:
        print(f"[{insight.type.value}] {insight.title} ({insight.confidence:.2f})")
        print(f"    {insight.description}")
        for action in insight.suggested_actions:
            print(f"    - {action}")


if __name__ == "__main__":
    main()
