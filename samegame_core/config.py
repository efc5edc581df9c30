from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_ROWS = 15
DEFAULT_COLS = 10
DEFAULT_IMAGE_COUNT = 4
DEFAULT_BLOCK_SIZE = 32  # pixels per cell in the browser


@dataclass(frozen=True)
class GameConfig:
    """Fixed construction parameters for a session and its presentation."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    image_count: int = DEFAULT_IMAGE_COUNT
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        for name in ('rows', 'cols', 'image_count', 'block_size'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f'{name} must be a positive integer, got {value!r}')


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


def debug_enabled() -> bool:
    """True when SAMEGAME_DEBUG asks for trace output."""
    return _env_flag('SAMEGAME_DEBUG')


def config_from_env() -> GameConfig:
    """
    Reads the board settings from the environment:
    SAMEGAME_ROWS, SAMEGAME_COLS, SAMEGAME_IMAGE_COUNT, SAMEGAME_BLOCK_SIZE.
    Unset variables fall back to the 15x10 board with 4 tile types and 32px cells.
    """
    return GameConfig(
        rows=_env_int('SAMEGAME_ROWS', DEFAULT_ROWS),
        cols=_env_int('SAMEGAME_COLS', DEFAULT_COLS),
        image_count=_env_int('SAMEGAME_IMAGE_COUNT', DEFAULT_IMAGE_COUNT),
        block_size=_env_int('SAMEGAME_BLOCK_SIZE', DEFAULT_BLOCK_SIZE),
    )


def submit_url() -> str:
    return os.getenv('SAMEGAME_SUBMIT_URL', '').strip()


def submit_timeout() -> float:
    raw = os.getenv('SAMEGAME_SUBMIT_TIMEOUT', '10')
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f'SAMEGAME_SUBMIT_TIMEOUT must be a number, got {raw!r}') from None
