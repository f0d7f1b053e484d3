"""Load project assumptions from a YAML scenario file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from evsolar_finance.config.assumptions import ProjectAssumptions

logger = logging.getLogger(__name__)


def load_assumptions(path: str | Path) -> ProjectAssumptions:
    """Read ``path`` and validate it into a ``ProjectAssumptions``.

    Missing groups and fields take their defaults.  Raises
    ``FileNotFoundError``, ``yaml.YAMLError``, ``ValueError`` (document is
    not a mapping) or ``pydantic.ValidationError`` (out-of-range values).
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")

    assumptions = ProjectAssumptions.model_validate(data)
    logger.debug("Loaded assumptions from %s", path)
    return assumptions
