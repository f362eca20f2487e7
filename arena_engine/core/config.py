"""
Arena configuration.

Loaded from keyword arguments or from a JSON file:

    {"size": 12, "seed": 42, "monsters_wander": true}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ArenaConfig(BaseModel):
    """
    Configuration for an arena.

    Attributes:
        size: Side length of the square grid, in tiles
        seed: Seed for the arena's random generator (None = unseeded)
        monsters_wander: Whether movable monsters take a random step
            after each hero move
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    size: int = Field(default=10, gt=0)
    seed: int | None = None
    monsters_wander: bool = True

    @classmethod
    def load(cls, path: str | Path) -> ArenaConfig:
        """Load a configuration from a JSON file."""
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        config = cls.model_validate(data)
        logger.info("Loaded arena config from %s: %s", path, config)
        return config
