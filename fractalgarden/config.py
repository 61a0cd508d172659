from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from fractalgarden.errors import ConfigurationError
from fractalgarden.patterns.palette import PALETTE, Color

logger = logging.getLogger(__name__)

DEFAULT_MOTIFS = "🌳,🌸,🍄"
PLACEHOLDER_MOTIF = "*"
MIN_DEPTH = 1
MAX_DEPTH = 12


@dataclass
class GardenConfig:
    view_width: int = 1200
    view_height: int = 800
    fps: int = 60
    motif_text: str = DEFAULT_MOTIFS
    fractal_count: int = 5
    depth: int = 8
    animate: bool = False
    debug: bool = False
    use_motifs: bool = True
    step_delay_ms: int = 50   # pause before every branch step
    seed_size: float = 60.0   # motif size at the root of every tree
    background: Color = (0, 0, 0)
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def adjust_depth(self, delta: int) -> int:
        self.depth = max(MIN_DEPTH, min(MAX_DEPTH, self.depth + delta))
        return self.depth

    def snapshot(self) -> "FrameConfig":
        """Freeze the values a frame reads while its trees are growing."""
        return FrameConfig(
            motifs=parse_motifs(self.motif_text),
            motif_text=self.motif_text,
            depth=self.depth,
            animate=self.animate,
            debug=self.debug,
            use_motifs=self.use_motifs,
            step_delay=max(0, self.step_delay_ms) / 1000.0,
            seed_size=self.seed_size,
        )


@dataclass(frozen=True)
class FrameConfig:
    motifs: Tuple[str, ...] = (PLACEHOLDER_MOTIF,)
    motif_text: str = ""
    depth: int = 8
    animate: bool = False
    debug: bool = False
    use_motifs: bool = True
    step_delay: float = 0.05
    seed_size: float = 60.0

    @property
    def active_length(self) -> int:
        if self.use_motifs:
            return max(1, len(self.motifs))
        return len(PALETTE)

    def content_for(self, index: int):
        """Glyph in motif mode, palette index in shape mode."""
        index %= self.active_length
        if self.use_motifs:
            return self.motifs[index]
        return index


def parse_motifs(text: str) -> Tuple[str, ...]:
    """Split a comma separated motif string, never returning an empty tuple.

    Blank entries keep their slot (they draw nothing) so "A,,B" cycles
    through three motifs; only an all-blank string falls back.
    """
    motifs = tuple(part.strip() for part in (text or "").split(","))
    if not any(motifs):
        logger.warning("Empty motif list %r; using placeholder %r", text, PLACEHOLDER_MOTIF)
        return (PLACEHOLDER_MOTIF,)
    return motifs


def _rgb(value: Any) -> Color:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 3
        or not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)
    ):
        raise ConfigurationError(f"background must be an RGB triple of 0-255 ints, got {value!r}")
    return tuple(value)


# Settings that default to None, with the type they take when set.
OPTIONAL_TYPES = {"seed": int, "log_file": str}


def _coerce(name: str, value: Any, default: Any) -> Any:
    if name == "background":
        return _rgb(value)
    if name in OPTIONAL_TYPES:
        kind = OPTIONAL_TYPES[name]
        if value is not None and (isinstance(value, bool) or not isinstance(value, kind)):
            raise ConfigurationError(f"{name} must be {kind.__name__} or empty, got {value!r}")
        return value
    if default is None:
        return value
    if value is None:
        raise ConfigurationError(f"{name} cannot be empty")
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigurationError(f"{name} must be true or false, got {value!r}")
        return value
    if isinstance(default, (int, float)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"{name} must be a number, got {value!r}")
        return type(default)(value)
    if isinstance(default, str):
        return str(value)
    return value


def config_from_mapping(data: Dict[str, Any], base: Optional[GardenConfig] = None) -> GardenConfig:
    cfg = base or GardenConfig()
    known = {f.name for f in dataclasses.fields(GardenConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")
    updates = {k: _coerce(k, v, getattr(cfg, k)) for k, v in data.items()}
    cfg = dataclasses.replace(cfg, **updates)
    if not MIN_DEPTH <= cfg.depth <= MAX_DEPTH:
        raise ConfigurationError(f"depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {cfg.depth}")
    if cfg.fractal_count < 0:
        raise ConfigurationError("fractal_count cannot be negative")
    return cfg


def load_config(path: Path | str, base: Optional[GardenConfig] = None) -> GardenConfig:
    """Read a YAML settings file on top of the defaults."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read settings from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of settings")
    cfg = config_from_mapping(data, base)
    logger.info("Loaded settings from %s", path)
    return cfg
