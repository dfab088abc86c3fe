import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from trigsketch import (
    Session,
    generate_tikz_document,
    get_layout_config,
    random_inputs,
)
from trigsketch.printer import format_corners, format_info, format_labels

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = get_layout_config()
    parser = argparse.ArgumentParser(description="Solve a right triangle from two known quantities")
    parser.add_argument("--hyp", default="", help="Hypotenuse")
    parser.add_argument("--opp", default="", help="Side opposite the angle θ")
    parser.add_argument("--adj", default="", help="Side adjacent to the angle θ")
    parser.add_argument("--ang", default="", help="Angle θ")
    parser.add_argument(
        "--radians",
        action="store_true",
        help="Interpret and report the angle in radians (default: degrees)",
    )
    parser.add_argument(
        "--formula",
        action="store_true",
        help="Treat inputs as symbols and report formulas instead of numbers",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Ignore the field options and solve a randomly generated triangle",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed used with --random",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=config.canvas_width,
        help=f"Canvas width (default: {config.canvas_width:g})",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=config.canvas_height,
        help=f"Canvas height (default: {config.canvas_height:g})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the solved triangle to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    session = Session(
        angle_unit="radians" if args.radians else "degrees",
        mode="formula" if args.formula else "value",
        canvas_size=(args.width, args.height),
    )

    if args.random:
        texts = random_inputs(session.angle_unit, random.Random(args.seed))
    else:
        texts = {"hyp": args.hyp, "opp": args.opp, "adj": args.adj, "ang": args.ang}
    logger.info("Solving from %s", {key: value for key, value in texts.items() if value})

    outcome = session.calculate(**texts)
    if not outcome.added:
        logger.error("Could not solve triangle: %s", outcome.error)
        print(f"Error: {outcome.error}")
        raise SystemExit(1)

    scene = session.scene()
    if scene is None:
        logger.error("No triangle selected after a successful solve")
        print("Error: no triangle to display")
        raise SystemExit(1)
    print(format_info(scene.triangle))
    print("Corners:")
    print(format_corners(scene.triangle))
    print("Labels:")
    print(format_labels(scene.labels))

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        document = generate_tikz_document(scene.triangle, scene.labels, texts=scene.texts)
        output_path.write_text(document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
