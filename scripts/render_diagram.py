#!/usr/bin/env python3
"""
Render a diagram config to text.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ascii_diagram.utils.config import Config
from ascii_diagram.diagram import render_config
from ascii_diagram.utils.logging import setup_logging


def parse_args():
    parser = argparse.ArgumentParser(description="Render an ASCII diagram")
    parser.add_argument(
        "--config",
        type=str,
        default=str(project_root / "configs" / "default_diagram.yml"),
        help="Path to configuration file"
    )
    parser.add_argument(
        "--scale",
        type=float,
        nargs="+",
        help="Override drawer scale: one factor, or separate x and y factors"
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write the diagram to this file instead of stdout"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        help="Override logging level"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    # Load configuration
    config = Config(args.config)

    # Override with command line arguments
    if args.scale:
        if len(args.scale) > 2:
            raise SystemExit("--scale takes one or two values")
        config.set('drawer.scale', args.scale[0] if len(args.scale) == 1 else list(args.scale))
    if args.output:
        config.set('output.path', args.output)
    if args.log_level:
        config.set('logging.level', args.log_level)

    # Setup logging
    logger = setup_logging(
        log_dir=config.get('logging.logs_dir', 'logs'),
        log_level=config.get('logging.level', 'WARNING'),
        log_to_file=config.get('logging.log_to_file', False)
    )

    logger.info(f"Rendering diagram from config: {args.config}")

    try:
        text = render_config(config)
    except Exception as e:
        logger.error(f"Rendering failed with error: {e}", exc_info=True)
        raise

    output_path = config.get('output.path')
    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Diagram written to {output_path}")
    else:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
