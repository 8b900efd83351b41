"""
Act registry: identity records read by the parsers.
"""

from .models import ActIdentity, ActStatus
from .act_index import ActIndexError, load_act_index, parse_act_index

__all__ = [
    "ActIdentity",
    "ActStatus",
    "ActIndexError",
    "load_act_index",
    "parse_act_index",
]
