#!/usr/bin/env python3
"""
Deprecated markup cleaner
Removes obsolete elements, comments and presentational attributes from HTML
"""

import argparse
import logging
import sys
from pathlib import Path

from bs4 import Comment, Tag

from domhtml import DocumentConfig, DomHtmlError, HtmlDocument
from domhtml.monitoring import LogManager

logger = logging.getLogger(__name__)

DEPRECATED_TAGS = ['applet', 'blink', 'marquee', 'frameset', 'noembed']
DEPRECATED_ATTRIBUTES = ['align', 'bgcolor', 'border', 'color', 'face', 'valign']


def clean_document(document: HtmlDocument, tags, attributes, strip_comments: bool = True):
    """
    Walk the document once and remove deprecated markup in place

    Returns:
        Tuple of (removed nodes, removed attributes)
    """
    removed_nodes = 0
    removed_attrs = 0
    for node in document:
        if strip_comments and isinstance(node, Comment):
            node.extract()
            removed_nodes += 1
        elif isinstance(node, Tag) and node.name in tags:
            node.decompose()
            removed_nodes += 1
        elif isinstance(node, Tag):
            for attr in attributes:
                if attr in node.attrs:
                    del node[attr]
                    removed_attrs += 1
    return removed_nodes, removed_attrs


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument('input', help='HTML file to clean')
    parser.add_argument('-o', '--output', help='Write the result here instead of stdout')
    parser.add_argument('--charset', help='Charset of the input file (detected if omitted)')
    parser.add_argument('--strip', nargs='+', default=DEPRECATED_TAGS, metavar='TAG',
                        help='Elements to remove together with their contents')
    parser.add_argument('--strip-attrs', nargs='*', default=DEPRECATED_ATTRIBUTES, metavar='ATTR',
                        help='Attributes to remove from every element')
    parser.add_argument('--keep-comments', action='store_true')
    parser.add_argument('--parser', default='html.parser', help='BeautifulSoup parser backend')
    parser.add_argument('--log-level', default='WARNING', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('--log-dir', help='Also write detailed logs to this directory')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the cleaner"""
    args = parse_args(argv)
    LogManager(log_dir=args.log_dir, log_level=args.log_level)

    try:
        data = Path(args.input).read_bytes()
        document = HtmlDocument(data, charset=args.charset,
                                config=DocumentConfig(parser=args.parser))
        removed_nodes, removed_attrs = clean_document(
            document,
            {tag.lower() for tag in args.strip},
            [attr.lower() for attr in args.strip_attrs],
            strip_comments=not args.keep_comments
        )
        logger.info(f"Removed {removed_nodes} nodes and {removed_attrs} attributes from {args.input}")
        output = document.return_html()
    except (OSError, DomHtmlError) as e:
        logger.error(f"Failed to process {args.input}: {e}")
        return 1

    if args.output:
        Path(args.output).write_bytes(output)
    else:
        sys.stdout.buffer.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
