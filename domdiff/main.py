#!/usr/bin/env python3
"""
DOM Diff Tool
Command line entry point: diff two HTML documents and print the annotated
new document or a change summary.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DiffConfig, load_config
from .dom_diff import DOMDiff
from .errors import DOMDiffError
from .file_utils import write_file_content
from .html_parser import HTMLParser

logger = logging.getLogger(__name__)

EXIT_UNCHANGED = 0
EXIT_CHANGED = 1
EXIT_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='domdiff',
        description='Mark the changes between two HTML documents for selective serialization.',
    )
    parser.add_argument('base', help='Base (original) HTML document')
    parser.add_argument('new', help='New (edited) HTML document')
    parser.add_argument('--config', help='JSON file with differ settings')
    parser.add_argument('--output', '-o', help='Write the annotated document here instead of stdout')
    parser.add_argument('--summary', action='store_true', help='Print a JSON change summary')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--trace', action='append', default=[], metavar='FLAG',
                        help='Enable a trace flag ("selser" traces the differ)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_arg_parser().parse_args(argv)

    # Configure logging
    debugging = args.debug or 'selser' in args.trace
    logging.basicConfig(level=logging.DEBUG if debugging else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else DiffConfig()
        parser = HTMLParser()
        base_root = parser.get_root(parser.parse_file(args.base))
        new_root = parser.get_root(parser.parse_file(args.new))
        result = DOMDiff(config).diff(base_root, new_root)
    except (DOMDiffError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Diff failed: {str(e)}")
        print(f"domdiff: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.summary:
        output = json.dumps(result.to_dict(), indent=2, sort_keys=True)
    else:
        output = result.to_html()

    if args.output:
        write_file_content(args.output, output)
    else:
        print(output)

    return EXIT_CHANGED if result.is_changed else EXIT_UNCHANGED


if __name__ == "__main__":
    sys.exit(main())
