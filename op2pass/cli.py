import argparse

from . import importer
from . import parsers
from . import utils
from .config import Config, DEFAULT_NAME_FILTER_REPLACEMENT, NAME_FIELDS


def resolve_config(args: argparse.Namespace) -> Config:
    return Config(force=args.force,
                  folder=args.folder or None,
                  name_field=args.name,
                  meta=args.meta,
                  name_filter_replacement=args.name_filter_replacement,
                  pass_command=utils.resolve_pass_command())


def cmd_import(args) -> int:
    config = resolve_config(args)
    records = parsers.parse_file(args.filename, config)
    print(f"Read {len(records)} passwords.")
    failed = importer.import_records(records, config)
    importer.report_failures(failed)
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="op2pass",
        description="Import 1Password exports (.txt or .1pif) into pass")
    parser.add_argument("filename", help="comma/tab delimited .txt export or .1pif file")
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing passwords")
    parser.add_argument("-d", "--default", dest="folder", metavar="FOLDER",
                        help="Place passwords into FOLDER")
    parser.add_argument("-n", "--name", choices=NAME_FIELDS, default="title",
                        help="Field to use as pass-name: title (default) or url")
    parser.add_argument("-m", "--meta", action=argparse.BooleanOptionalAction, default=True,
                        help="Import metadata and insert it below the password (default: on)")
    parser.add_argument("-z", "--name-filter-replacement", metavar="SYMBOL",
                        default=DEFAULT_NAME_FILTER_REPLACEMENT,
                        help="Replace / and \\ in pass-names with SYMBOL (default: _)")
    parser.add_argument("--no-name-filter-replacement", dest="name_filter_replacement",
                        action="store_const", const=None,
                        help="Keep pass-names exactly as exported")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.set_defaults(func=cmd_import)
    return parser
