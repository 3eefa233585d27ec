#!/usr/bin/env python3
"""
Build command for the style generation engine.

Emits grid column, push and pull rules and the configured responsive
rules as a stylesheet.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import GridEngineError
from .grid.columns import PushPull
from .grid.generator import column_rules, push_pull_rules
from .responsive.declarations import generate
from .stylesheet import StylesheetBuilder
from .utils.config import Config
from .utils.logging import PerformanceLogger, log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Generate a responsive grid stylesheet")
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON configuration file')
    parser.add_argument('--output', '-o', type=str, default=None, help='Write the stylesheet here instead of stdout')
    parser.add_argument('--minified', action='store_true', help='Minify the output')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', type=str, default=None, help='Also log to this file')
    return parser.parse_args(argv)


def build(config: Config, minified: bool = False) -> str:
    """
    Build the stylesheet text for a configuration.

    Args:
        config: Build configuration
        minified: Whether the output is minified

    Returns:
        str: Stylesheet text

    Raises:
        GridEngineError: On invalid grid settings or unit conversions
    """
    grid = config.grid_config()
    naming = config.naming()

    rules = column_rules(grid, naming)
    rules.extend(push_pull_rules(PushPull.PUSH, grid, naming))
    rules.extend(push_pull_rules(PushPull.PULL, grid, naming))

    breakpoints = config.breakpoint_map()
    responsive = []
    for rule in config.responsive_rules():
        result = generate(
            rule["properties"],
            rule["value"],
            rule.get("overrides", {}),
            breakpoints,
            use_unit_mixins=config.use_unit_mixins(),
            base_font_size=config.base_font_size(),
            base_line_height=config.base_line_height(),
        )
        if not result.ok:
            logger.warning(f"{rule['selector']}: skipped {len(result.warnings)} unresolved breakpoint(s)")
        responsive.append((rule["selector"], result))

    builder = StylesheetBuilder(minified=minified)
    return builder.serialize(builder.build(rules, responsive))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the build command."""
    args = parse_arguments(argv)

    setup_logging(log_file=args.log_file, debug=args.debug)
    perf = PerformanceLogger(logger, "build")

    try:
        config = Config(args.config)
        perf.start("stylesheet")
        css_text = build(config, minified=args.minified)
        perf.end("stylesheet")
    except (GridEngineError, ValueError) as e:
        log_exception(logger, e, "Stylesheet build failed")
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(css_text)
            f.write("\n")
        logger.info(f"Stylesheet written to {args.output}")
    else:
        sys.stdout.write(css_text + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
