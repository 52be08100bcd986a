import logging
import subprocess
import sys
from typing import Iterable, List

from .config import Config
from .record import Record

logger = logging.getLogger(__name__)

FORCE_HINT = ("Check the errors. Make sure these passwords do not already exist. "
              "If you're sure you want to overwrite them with the new import, "
              "try again with --force.")


def format_secret(record: Record, meta: bool = True) -> str:
    lines = [record.password]
    if meta:
        if record.login: lines.append(f"login: {record.login}")
        if record.url: lines.append(f"url: {record.url}")
        if record.notes: lines.append(record.notes.rstrip("\n"))
    return "\n".join(lines) + "\n"


def build_command(record: Record, config: Config) -> List[str]:
    cmd = [config.pass_command, "insert", "--multiline"]
    if config.force:
        cmd.append("--force")
    cmd.append(record.name)
    return cmd


def insert_record(record: Record, config: Config) -> bool:
    cmd = build_command(record, config)
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, input=format_secret(record, config.meta), text=True,
                              stdout=subprocess.DEVNULL)
    except FileNotFoundError:
        raise SystemExit(f"Could not run '{config.pass_command}'. Is pass installed?")
    return proc.returncode == 0


def import_records(records: Iterable[Record], config: Config) -> List[Record]:
    """Insert each record in order and return the ones pass rejected."""
    failed = []
    for record in records:
        if insert_record(record, config):
            print(f"Imported {record.name}")
        else:
            print(f"ERROR: Failed to import {record.name}", file=sys.stderr)
            failed.append(record)
    return failed


def report_failures(failed: List[Record]):
    if not failed:
        return
    print(f"Failed to import {', '.join(r.name for r in failed)}", file=sys.stderr)
    print(FORCE_HINT, file=sys.stderr)
