import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from radar_layout import (
    ValidationError,
    config_from_mapping,
    get_simulation_options,
    layout_radar,
)
from radar_layout.sampler import DEFAULT_SEED

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a headless radar layout")
    parser.add_argument("path", help="Path to the radar JSON document")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed of the placement sampler (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        help="Upper bound on collision simulation ticks",
    )
    parser.add_argument(
        "--print-layout",
        action="store_true",
        help="Color inactive entries with their ring color",
    )
    parser.add_argument(
        "--output",
        help="Write the layout JSON to this path instead of stdout",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading radar document from %s", args.path)
    with open(args.path, encoding="utf-8") as fin:
        data = json.load(fin)

    try:
        config = config_from_mapping(data)
        if args.print_layout:
            config.print_layout = True
        options = get_simulation_options()
        if args.max_ticks is not None:
            options.max_ticks = args.max_ticks
        layout = layout_radar(config, options, seed=args.seed)
    except ValidationError as exc:
        logger.error("Invalid radar document: %s", exc)
        raise SystemExit(1) from exc

    rendered = json.dumps(layout.to_dict(), indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        logger.info("Layout written to %s", output_path)
    else:
        print(rendered)


if __name__ == "__main__":
    main(sys.argv[1:])
