import logging
import sys
from .cli import build_parser

"""
op2pass — import 1Password exports into pass (the standard unix password manager).
Supports:
    comma/tab delimited .txt exports, logins from .1pif interchange files
Usage examples:
    python -m op2pass export.txt
    python -m op2pass --default imported --name url data.1pif
    python -m op2pass --force --no-meta export.txt
Set OP2PASS_PASS_BIN to use a pass executable other than `pass` on PATH.
"""

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")
    try:
        sys.exit(args.func(args))
    except KeyboardInterrupt:
        print("\nAborted by user.")
        sys.exit(1)

if __name__ == "__main__":
    main()
