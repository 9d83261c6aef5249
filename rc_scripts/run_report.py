"""Run every canned scene and store a markdown report.

Usage:
    python -m rc_scripts.run_report --out artifacts/report.md
"""

from __future__ import annotations

import argparse
import logging
import shutil
from pathlib import Path

from rc_core.logging_config import setup_logging
from scenes.runner import run_all


def main() -> None:
    parser = argparse.ArgumentParser(description="Run scene sweep report.")
    parser.add_argument("--out", default="artifacts/report.md", help="Output markdown report path")
    parser.add_argument("--workdir", default="artifacts", help="Directory for plots and the generated report")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    generated = Path(run_all(args.workdir))
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if generated.resolve() != out_path.resolve():
        shutil.copyfile(generated, out_path)
    print(out_path)


if __name__ == "__main__":
    main()
