from __future__ import annotations

import argparse
from typing import List, Optional

from loguru import logger

from . import __version__
from .config import DEFAULT_CONFIG, DEFAULT_EXTENSIONS, Config
from .errors import ConfigError
from .log import setup_logging
from .scanner import FileScanner
from .session import NormalizationSession


PROG = "srcnorm"

VERSION_TEXT = f"""\
{PROG} {__version__}
This program comes with ABSOLUTELY NO WARRANTY.
This is free software, and you can redistribute it under the terms of
GNU GPL version 3 license or later <http://gnu.org/licenses/gpl.html>.
"""

EPILOG = f"""\
If no extensions were given, the following are assumed: {DEFAULT_EXTENSIONS}
When path is a directory, and also in recursive mode, only files with
the chosen extensions are examined.
If the path is a normal file, it'll be processed regardless of the extension.
Without the '--fix' option, detected problems are reported but not fixed.
Recursion always skips subdirectories with names having a leading period.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=f"Detect and optionally fix whitespace issues in source files.\nExample: {PROG} -rv -s bin .",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('paths', nargs='+', metavar='path', help='file or directory to examine')
    parser.add_argument('-e', '--extension', action='append', default=[], metavar='ext[,ext]...', help='extensions to be treated as source files')
    parser.add_argument('-f', '--fix', action='store_true', help='fix detected easily fixable errors')
    parser.add_argument('-r', '--recursive', action='store_true', help='recurse to subdirectories')
    parser.add_argument('-s', '--skip', action='append', default=[], metavar='name[,name]...', help='subdirectories to skip when recursing')
    parser.add_argument('-t', '--tabsize', default=None, metavar='n', help='set the tab size (default is 4)')
    parser.add_argument('-v', '--verbose', action='store_true', help='display lots of messages')
    parser.add_argument('-V', '--version', action='version', version=VERSION_TEXT)
    parser.add_argument('--config', default=DEFAULT_CONFIG, help='path of the YAML config file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = Config.load(args.config).override(
            fix=args.fix,
            verbose=args.verbose,
            recursive=args.recursive,
            tab_size=args.tabsize,
            skip=args.skip,
            extensions=args.extension,
        )
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(cfg.verbose)

    session = NormalizationSession(cfg)
    scanner = FileScanner(cfg, session)
    for p in args.paths:
        # Stop at the first serious error
        if not scanner.process(p):
            return 1

    found = sum(1 for r in scanner.reports if r.defects)
    fixed = sum(1 for r in scanner.reports if r.fixed)
    logger.debug("examined {} files, {} with defects, {} fixed", len(scanner.reports), found, fixed)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
