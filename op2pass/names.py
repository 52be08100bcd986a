import logging
import re
from typing import Optional

from .config import Config

logger = logging.getLogger(__name__)


def filter_name(name: str, pattern: re.Pattern, replacement: Optional[str]) -> str:
    """Replace path separators in `name`, warning when anything changed.

    A `replacement` of None disables filtering. The replacement is inserted
    literally, so backslashes in it are not treated as group references.
    """
    if replacement is None:
        return name
    filtered = pattern.sub(lambda _m: replacement, name)
    if filtered != name:
        logger.warning("Changed entry name from '%s' to '%s'", name, filtered)
    return filtered


def build_name(value: str, config: Config) -> str:
    """Folder-prefixed pass-name for `value`, or "" when nothing is left to name it by."""
    name = filter_name(value, config.name_filter_pattern, config.name_filter_replacement)
    if not name:
        return ""
    if config.folder:
        return f"{config.folder}/{name}"
    return name
