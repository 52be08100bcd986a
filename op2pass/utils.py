import os
from .config import DEFAULT_PASS_BIN

def resolve_pass_command() -> str:
    env = os.getenv("OP2PASS_PASS_BIN")
    return env if env else DEFAULT_PASS_BIN
