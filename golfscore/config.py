"""Stableford point table configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .schemas import StablefordTable
from .utils import load_json, save_json

logger = logging.getLogger('golfscore.config')

CONFIG_DIR_ENV = 'GOLFSCORE_CONFIG_DIR'
CONFIG_FILENAME = 'stableford_config.json'

# Example table kept with the repo; edits are saved to the user config dir
SAMPLE_CONFIG_PATH = Path(__file__).parent.parent / 'data' / CONFIG_FILENAME


def default_config_path() -> Path:
    """Where the point table lives: $GOLFSCORE_CONFIG_DIR, else ~/.golfscore."""
    config_dir = os.environ.get(CONFIG_DIR_ENV)
    base = Path(config_dir) if config_dir else Path.home() / '.golfscore'
    return base / CONFIG_FILENAME


def _resolve(path: Optional[Path | str]) -> Path:
    return Path(path) if path is not None else default_config_path()


def load_stableford_table(path: Optional[Path | str] = None) -> StablefordTable:
    """
    Load the Stableford point table from disk, bypassing the cache.

    A missing file means the user never changed the table, so the default
    table is returned.

    Raises:
        ValueError: If the file exists but has an invalid structure
    """
    path = _resolve(path)
    if not path.exists():
        logger.debug(f'No Stableford config at {path}, using defaults')
        return StablefordTable.default()
    return load_json(path, schema=StablefordTable)


@lru_cache(maxsize=None)
def get_stableford_table(path: Optional[Path | str] = None) -> StablefordTable:
    """
    Process-wide Stableford point table.

    Configuration is cached after first load. Pass the result to the
    scorer explicitly; scoring functions never read it themselves.

    Example:
        from golfscore.config import get_stableford_table
        table = get_stableford_table()
        print(table.points_by_band())
    """
    return load_stableford_table(path)


def save_stableford_table(table: StablefordTable, path: Optional[Path | str] = None) -> None:
    """Persist a point table and drop the cached copy."""
    path = _resolve(path)
    save_json(path, table)
    logger.info(f'Saved Stableford table to {path}: {table.points_by_band()}')
    clear_config_cache()


def update_stableford_points(path: Optional[Path | str] = None, **points: int) -> StablefordTable:
    """
    Change the points for one or more bands and persist the result.

    Example:
        update_stableford_points(birdie=4, par=2)
    """
    table = load_stableford_table(path).with_points(**points)
    save_stableford_table(table, path)
    return table


def reset_stableford_table(path: Optional[Path | str] = None) -> StablefordTable:
    """Restore and persist the default point table."""
    table = StablefordTable.default()
    save_stableford_table(table, path)
    return table


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified outside this module and you
    need to reload it.
    """
    get_stableford_table.cache_clear()
