"""
Act index loader.

The act index is configuration data kept outside the parsing code: a YAML
file listing the identity record of every act, e.g.

    acts:
      - id: computer-law-1995
        law_name: Computers Law
        year: 1995
        title: "חוק המחשבים, תשנ\"ה-1995"
        title_en: Computers Law, 5755-1995
        abbreviation: CL
        status: in_force
        issued_date: "1995-07-25"
        in_force_date: "1995-10-25"
        url: https://www.unodc.org/...

Dates must be quoted, otherwise YAML turns them into date objects.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..config import config
from .models import ActIdentity

logger = logging.getLogger(__name__)


class ActIndexError(Exception):
    """Unreadable act index or invalid identity record."""

    def __init__(self, message: str, path: str = "", act_id: str = ""):
        self.path = path
        self.act_id = act_id
        super().__init__(message)


def load_act_index(path: Optional[Union[str, Path]] = None) -> dict[str, ActIdentity]:
    """
    Loads the act index, keyed by act id, in file order.

    Args:
        path: YAML file (defaults to config.act_index_path)

    Returns:
        Dict act_id -> ActIdentity

    Raises:
        ActIndexError: missing/invalid file, invalid record or duplicated id
    """
    path = Path(path or config.act_index_path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ActIndexError(f"Cannot read act index: {e}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise ActIndexError(f"Invalid YAML in act index: {e}", path=str(path)) from e

    return parse_act_index(data, source=str(path))


def parse_act_index(data: object, source: str = "") -> dict[str, ActIdentity]:
    """Validates an already-decoded act index document."""
    if not isinstance(data, dict) or not isinstance(data.get("acts"), list):
        raise ActIndexError("Act index must be a mapping with an 'acts' list", path=source)

    index: dict[str, ActIdentity] = {}
    for position, entry in enumerate(data["acts"]):
        act_id = entry.get("id", "") if isinstance(entry, dict) else ""
        try:
            identity = ActIdentity.model_validate(entry)
        except ValidationError as e:
            raise ActIndexError(
                f"Invalid act record #{position} ({act_id or 'no id'}): {e}",
                path=source,
                act_id=act_id,
            ) from e

        if identity.id in index:
            raise ActIndexError(
                f"Duplicated act id: {identity.id}", path=source, act_id=identity.id
            )
        index[identity.id] = identity

    logger.info(f"Act index loaded: {len(index)} acts from {source or '<memory>'}")
    return index
