"""Generate productivity insights from a JSON activity dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from productivity_insights.adapters import json_adapter
from productivity_insights.config import load_config
from productivity_insights.engine import generate_insights
from productivity_insights.windows import to_local_naive


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the productivity insight engine")
    parser.add_argument("--data", required=True, help="Path to a JSON activity dataset")
    parser.add_argument("--config", help="Path to a TOML file with an [insights] table")
    parser.add_argument("--now", help="ISO-8601 reference time (defaults to the current time)")
    parser.add_argument("--output", help="Where to save the JSON report")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("run_insights")

    try:
        dataset = json_adapter.parse(args.data)
        now = to_local_naive(datetime.fromisoformat(args.now)) if args.now else None
    except ValueError as exc:
        parser.exit(2, f"error: {exc}\n")

    config = None
    if args.config:
        config, warning = load_config(Path(args.config))
        if warning:
            logger.warning(warning)

    insights = generate_insights(dataset, now=now, config=config)
    report = {
        "generated_at": (now or datetime.now()).isoformat(),
        "n_insights": len(insights),
        "insights": json_adapter.dump_insights(insights),
    }

    print(json.dumps(report, indent=2, default=str))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
        print(f"Saved insight report to {out_path}")


if __name__ == "__main__":
    main()
