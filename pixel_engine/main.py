#!/usr/bin/env python3
"""
Pixel Engine command line entry point.

Renders an HTML file styled by a CSS file to a PNG image.
"""

import argparse
import sys

from pixel_engine.core import RenderEngine
from pixel_engine.errors import RenderError
from pixel_engine.utils.config import Config
from pixel_engine.utils.logging import get_default_log_file, log_exception, setup_logging


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render HTML and CSS to a PNG image")
    parser.add_argument('-m', '--html', required=True, help='HTML document to render')
    parser.add_argument('-c', '--css', required=True, help='CSS stylesheet to apply')
    parser.add_argument('-o', '--output', default=None, help='Output PNG file')
    parser.add_argument('-W', '--width', type=int, default=None, help='Viewport width in pixels')
    parser.add_argument('-H', '--height', type=int, default=None, help='Viewport height in pixels')
    parser.add_argument('--config', default=None, help='Path to a JSON configuration file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the renderer."""
    args = parse_arguments(argv)

    config = Config(args.config)
    if args.width is not None:
        config.set('viewport.width', args.width)
    if args.height is not None:
        config.set('viewport.height', args.height)
    if args.output is not None:
        config.set('output.path', args.output)

    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    log_file = get_default_log_file() if config.get('logging.log_to_file', False) else None
    logger = setup_logging(log_file=log_file,
                           console_level=console_level,
                           file_level=config.get('logging.file_level', "DEBUG"))

    logger.info(f"Rendering {args.html} with {args.css}")

    try:
        with open(args.html, 'r', encoding='utf-8') as f:
            html_content = f.read()
        with open(args.css, 'r', encoding='utf-8') as f:
            css_content = f.read()

        engine = RenderEngine(config)
        canvas = engine.render_source(html_content, css_content)
        canvas.save(config.get('output.path', 'output.png'))
    except (OSError, RenderError) as e:
        log_exception(logger, e, "Rendering failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
