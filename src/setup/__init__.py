"""Meeting setup module.

Provides roster editing and validation of the start request before a
round is scheduled.
"""

from src.setup.roster import add_names, parse_names, remove_name
from src.setup.schemas import SetupPreview, StartRequest, preview

__all__ = [
    "SetupPreview",
    "StartRequest",
    "add_names",
    "parse_names",
    "preview",
    "remove_name",
]
