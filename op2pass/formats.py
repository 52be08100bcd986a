import os

from .config import ACCEPTED_FORMATS, SUPPORTED_TYPES_MSG


def unreadable(filename: str, err: Exception) -> SystemExit:
    if isinstance(err, UnicodeDecodeError):
        return SystemExit(f"Could not read {filename}: not UTF-8 encoded ({err.reason} at byte {err.start})")
    return SystemExit(f"Could not read {filename}: {err.strerror or err}")


def detect_format(filename: str) -> str:
    ext = os.path.splitext(filename.lower())[1]
    if ext not in ACCEPTED_FORMATS:
        raise SystemExit(SUPPORTED_TYPES_MSG)
    return ACCEPTED_FORMATS[ext]


def detect_delimiter(filename: str) -> str:
    # Only the first line is looked at; the rest of the file is trusted.
    try:
        with open(filename, "r", encoding="utf-8", newline="") as fh:
            first_line = fh.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise unreadable(filename, e)
    if "," in first_line:
        return ","
    if "\t" in first_line:
        return "\t"
    raise SystemExit(SUPPORTED_TYPES_MSG)
