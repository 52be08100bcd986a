import re
from dataclasses import dataclass
from typing import Optional

ACCEPTED_FORMATS = {".txt": "txt", ".1pif": "1pif"}
SUPPORTED_TYPES_MSG = "Supported file types: comma/tab delimited .txt files and .1pif files."

NAME_FIELDS = ("title", "url")
DEFAULT_NAME_FILTER_PATTERN = re.compile(r"[/\\]")
DEFAULT_NAME_FILTER_REPLACEMENT = "_"
DEFAULT_PASS_BIN = "pass"

WEBFORM_TYPE = "webforms.WebForm"


@dataclass(frozen=True)
class Config:
    force: bool = False
    folder: Optional[str] = None
    name_field: str = "title"
    meta: bool = True
    name_filter_pattern: re.Pattern = DEFAULT_NAME_FILTER_PATTERN
    # None turns name sanitizing off
    name_filter_replacement: Optional[str] = DEFAULT_NAME_FILTER_REPLACEMENT
    pass_command: str = DEFAULT_PASS_BIN
