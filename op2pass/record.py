from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One password entry, ready to be handed to `pass insert`."""
    name: str
    title: str = ""
    password: str = ""
    login: str = ""
    url: str = ""
    notes: str = ""
