import csv
import json
import logging
import re
from typing import Any, Dict, Iterator, List, Optional

from .config import Config, WEBFORM_TYPE
from .formats import detect_delimiter, detect_format, unreadable
from .names import build_name
from .record import Record

logger = logging.getLogger(__name__)


def normalize_header(label: str) -> str:
    """Turn a header label like ' User - Name ' into 'user_name'."""
    label = re.sub(r"[^\s\w]+", "", label.lower()).strip()
    return re.sub(r"\s+", "_", label)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _name_for(value: str, title: str, config: Config) -> Optional[str]:
    name = build_name(value, config)
    if not name:
        logger.warning("Skipping entry '%s': no %s to name it by", title, config.name_field)
        return None
    return name


def _make_record(name_value: str, title: str, password: str, login: str,
                 url: str, notes: str, config: Config) -> Optional[Record]:
    name = _name_for(name_value, title, config)
    if name is None:
        return None
    if not password:
        logger.warning("No password found in entry %s", title)
    return Record(name=name, title=title, password=password,
                  login=login, url=url, notes=notes)


def parse_delimited(filename: str, config: Config, delimiter: str | None = None) -> List[Record]:
    if delimiter is None:
        delimiter = detect_delimiter(filename)
    records = []
    try:
        with open(filename, "r", encoding="utf-8", newline="") as fh:
            reader = csv.reader(fh, delimiter=delimiter)
            header = next(reader, None)
            if header is None:
                return records
            keys = [normalize_header(h) for h in header]
            for row in reader:
                if not row:
                    continue
                entry = {k: _text(v) for k, v in zip(keys, row)}
                record = _make_record(entry.get(config.name_field, ""), entry.get("title", ""),
                                      entry.get("password", ""), entry.get("username", ""),
                                      entry.get("url", ""), entry.get("notes", ""), config)
                if record:
                    records.append(record)
    except (OSError, UnicodeDecodeError) as e:
        raise unreadable(filename, e)
    return records


def find_field(entry: Dict[str, Any], designation: str) -> Optional[str]:
    """Value of the first secureContents field named or designated `designation`."""
    fields = (entry.get("secureContents") or {}).get("fields") or []
    for field in fields:
        if field.get("name") == designation or field.get("designation") == designation:
            return _text(field.get("value"))
    return None


def _read_lines(filename: str) -> List[str]:
    try:
        with open(filename, "r", encoding="utf-8") as fh:
            return fh.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise unreadable(filename, e)


def iter_1pif(filename: str) -> Iterator[Dict[str, Any]]:
    for lineno, line in enumerate(_read_lines(filename), 1):
        if line.startswith("***") or not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise SystemExit(f"Invalid 1PIF entry on line {lineno} of {filename}: {e.msg}")


def parse_1pif(filename: str, config: Config) -> List[Record]:
    # 1PIF keeps the URL in "location"
    name_key = "location" if config.name_field == "url" else config.name_field
    records = []
    for entry in iter_1pif(filename):
        if entry.get("typeName") != WEBFORM_TYPE:
            continue
        title = _text(entry.get("title"))
        password = find_field(entry, "password")
        if password is None:
            logger.warning("No password found in entry %s", title)
            password = ""
        login = find_field(entry, "username")
        if login is None:
            logger.warning("No username found in entry %s", title)
            login = ""
        name = _name_for(_text(entry.get(name_key)), title, config)
        if name is None:
            continue
        notes = _text((entry.get("secureContents") or {}).get("notesPlain"))
        records.append(Record(name=name, title=title, password=password, login=login,
                              url=_text(entry.get("location")), notes=notes))
    return records


def parse_file(filename: str, config: Config) -> List[Record]:
    if detect_format(filename) == "1pif":
        return parse_1pif(filename, config)
    return parse_delimited(filename, config)
