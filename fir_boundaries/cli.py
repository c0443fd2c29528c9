#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from .documents import load_document, save_document
from .engines import Mode
from .errors import CollectedErrors, FIRParsingError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Validate, fix and convert FIR boundary files')

    parser.add_argument('input', help='Input file, .dat or .geojson/.json')
    parser.add_argument(
        'output',
        nargs='?',
        help='Output file. If missing only validation is done. Same type as the input: fixes are written to it. '
             'Other type: the input is converted into it',
    )
    parser.add_argument(
        '--mode',
        choices=[m.value for m in Mode],
        help='strict only reports problems, fix repairs them (default: fix with an output, strict without)',
    )
    parser.add_argument('--summary', help='Print a table of the parsed records', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    mode = Mode(args.mode) if args.mode else (Mode.FIX if args.output else Mode.STRICT)

    try:
        document = load_document(args.input, mode)
        if args.summary:
            print(document.to_records().to_dataframe().to_string())
        if args.output:
            save_document(document, args.output)
    except CollectedErrors as e:
        logger.error(f"{args.input}: {len(e.errors)} problems found in {mode.value} mode:\n{e}")
        return 1
    except FIRParsingError as e:
        logger.error(f"{args.input}: {e}")
        return 1
    except OSError as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"{args.input}: no problems found")
    return 0


if __name__ == '__main__':
    sys.exit(main())
