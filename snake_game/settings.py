"""
Game configuration.

Settings come from three layers, later ones winning:

1. ``GameConfig`` defaults
2. a YAML file (``config/default.yaml`` next to this module, or the path in
   the ``SNAKE_CONFIG`` environment variable)
3. ``SNAKE_<FIELD>`` environment variables, e.g. ``SNAKE_WIDTH=60``.
   A ``.env`` file in the working directory is loaded first.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from dotenv import load_dotenv

from domain import constants
from domain.snake import Snake
from errors import ConfigError
from services.patterns import LAST_PATTERN_LEVEL, build_obstacles, get_level_pattern

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config' / 'default.yaml'
ENV_PREFIX = "SNAKE_"


@dataclass
class GameConfig:
    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    border_thickness: int = constants.BORDER_THICKNESS
    starting_level: int = constants.STARTING_LEVEL
    max_levels: int = constants.MAX_LEVELS
    score_per_level: int = constants.SCORE_PER_LEVEL
    base_tick_rate: int = constants.BASE_TICK_RATE
    speed_decrease_per_level: int = constants.SPEED_DECREASE_PER_LEVEL
    min_tick_rate: int = constants.MIN_SPEED
    start_divisor: int = constants.START_DIVISOR
    food_max_attempts: Optional[int] = None

    def validate(self) -> "GameConfig":
        """
        Check value ranges.

        Raises:
            ConfigError: on the first invalid value
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.name == "food_max_attempts":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")

        if self.border_thickness < 0:
            raise ConfigError("border_thickness must not be negative")
        # Room for a 3-cell snake plus one more cell, before obstacles.
        min_width = 2 * self.border_thickness + constants.INITIAL_SNAKE_LENGTH + 1
        min_height = 2 * self.border_thickness + 1
        if self.width < min_width:
            raise ConfigError(f"width {self.width} is too small, need at least {min_width}")
        if self.height < min_height:
            raise ConfigError(f"height {self.height} is too small, need at least {min_height}")
        if self.max_levels < 1:
            raise ConfigError("max_levels must be at least 1")
        if not 1 <= self.starting_level <= self.max_levels:
            raise ConfigError(
                f"starting_level must be between 1 and max_levels ({self.max_levels}), "
                f"got {self.starting_level}"
            )
        if self.score_per_level < 1:
            raise ConfigError("score_per_level must be at least 1")
        if self.min_tick_rate < 1:
            raise ConfigError("min_tick_rate must be at least 1 ms")
        if self.base_tick_rate < self.min_tick_rate:
            raise ConfigError("base_tick_rate must not be below min_tick_rate")
        if self.speed_decrease_per_level < 0:
            raise ConfigError("speed_decrease_per_level must not be negative")
        if self.start_divisor < 1:
            raise ConfigError("start_divisor must be at least 1")
        if self.food_max_attempts is not None and self.food_max_attempts < 1:
            raise ConfigError("food_max_attempts must be at least 1 when set")
        self._check_level_layouts()
        return self

    def start_position(self) -> Tuple[int, int]:
        """Head cell for a fresh snake, clamped so every segment is inside the border."""
        border = self.border_thickness
        min_x = border + constants.INITIAL_SNAKE_LENGTH - 1
        head_x = min(max(self.width // self.start_divisor, min_x), self.width - border - 1)
        head_y = min(max(self.height // self.start_divisor, border), self.height - border - 1)
        return head_x, head_y

    def _check_level_layouts(self) -> None:
        """
        Every obstacle layout the game can reach must keep clear of the
        starting snake and leave at least one interior cell for food.
        """
        border = self.border_thickness
        snake_cells = set(Snake(*self.start_position()).body)
        interior = (self.width - 2 * border) * (self.height - 2 * border)

        last = min(self.max_levels, LAST_PATTERN_LEVEL)
        for level in range(min(self.starting_level, last), last + 1):
            blocked = set()
            for obstacle in build_obstacles(get_level_pattern(level, self.width, self.height)):
                blocked.update(obstacle.blocks)

            if blocked & snake_cells:
                raise ConfigError(
                    f"{self.width}x{self.height} arena is too small: level {level} "
                    f"obstacles overlap the starting snake"
                )
            blocked_inside = sum(
                1 for p in blocked
                if border <= p.x < self.width - border and border <= p.y < self.height - border
            )
            if interior - blocked_inside - len(snake_cells) < 1:
                raise ConfigError(
                    f"{self.width}x{self.height} arena is too small: level {level} "
                    f"leaves no free cell for food"
                )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _field_names():
    return {f.name for f in fields(GameConfig)}


def load_yaml_config(path: Path) -> Dict[str, Any]:
    """Load settings from a YAML file. A missing default file yields no settings."""
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        if Path(path) == DEFAULT_CONFIG_PATH:
            logger.warning("Default config %s not found, using built-in defaults", path)
            return {}
        raise ConfigError(f"Config file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    unknown = set(data) - _field_names()
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")
    return data


def env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    """Collect ``SNAKE_<FIELD>`` overrides from an environment mapping."""
    overrides: Dict[str, Any] = {}
    for name in _field_names():
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is None or raw.strip() == "":
            continue
        if name == "food_max_attempts" and raw.strip().lower() in ("none", "null"):
            overrides[name] = None
            continue
        try:
            overrides[name] = int(raw)
        except ValueError:
            raise ConfigError(f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}")
    return overrides


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a validated GameConfig.

    Args:
        path: YAML file to read. Defaults to $SNAKE_CONFIG, then config/default.yaml.
        env: environment mapping for overrides. Defaults to os.environ after
             loading a .env file.

    Raises:
        ConfigError: if the file is unreadable or a value is invalid
    """
    if env is None:
        load_dotenv()
        env = os.environ

    config_path = Path(path or env.get(ENV_PREFIX + "CONFIG") or DEFAULT_CONFIG_PATH)
    values = load_yaml_config(config_path)
    values.update(env_overrides(env))

    config = GameConfig(**values).validate()
    logger.info("Loaded config from %s: %s", config_path, config.to_dict())
    return config
