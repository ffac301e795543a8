"""
Demo script: convert CSV files to Parquet via the public API.

Usage:
    uv run python scripts/run_convert.py inputs/books.csv [more.csv ...]
    uv run python scripts/run_convert.py --csv inputs/books.csv   # CSV output

Each input file gets its own output subdirectory and config under outputs/.
On the first run, init() parses the file, writes the config and converts.
On later runs the existing config is reused via convert().
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_convert")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import csv_combinators
    from csv_combinators.config import load_config, save_config

    args = sys.argv[1:]
    as_csv = "--csv" in args
    input_files = [a for a in args if not a.startswith("--")]
    if not input_files:
        log.error("Usage: run_convert.py [--csv] FILE [FILE ...]")
        return 2

    failures = 0
    for input_path in input_files:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        name = Path(input_path).stem
        output_dir = str(OUTPUT_ROOT / name)
        config_path = OUTPUT_ROOT / f"{name}.yaml"

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("  output_dir  : %s", output_dir)
        log.info("  config_path : %s", config_path)
        log.info("=" * 70)

        try:
            if not config_path.exists():
                config = csv_combinators.init(
                    input_path,
                    output_dir=output_dir,
                    config_path=str(config_path),
                    run_immediately=False,
                )
                if as_csv:
                    config.output.output_format = "csv"
                    save_config(config, config_path)
            written = csv_combinators.convert(config_path)
        except (csv_combinators.DocumentParseError, csv_combinators.SourceDecodeError) as exc:
            log.error("FAIL  %s", exc)
            failures += 1
            continue

        fmt = load_config(config_path).output.output_format
        for path in written:
            log.info("  wrote %s (%s)", path, fmt)

    log.info("All files processed (%d failed).", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
