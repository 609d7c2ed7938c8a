"""Loading the track and locomotive settings from an INI file."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SETTINGS_PATH = Path("config/settings.ini")
DEFAULT_WHEEL_FORMULA = "2.0,2.0,4.66,2.0,2.0"


def _to_float(text: str | None, default: float = 0.0) -> float:
    """Convert *text* to float; an unparsable value becomes 0.0, a missing one *default*."""
    if text is None:
        return default
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _unquote(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


def parse_wheel_formula(text: str) -> list[float]:
    """Split a comma separated list of axle spacings, skipping empty parts."""
    return [_to_float(part) for part in text.split(",") if part]


@dataclass(frozen=True)
class Settings:
    """Sensor spacing, axle spacing and locomotive speed."""

    d12: float = 31.50
    d23: float = 3.20
    d34: float = 0.60
    d45: float = 35.10
    wheel_formula: tuple[float, ...] = field(
        default_factory=lambda: tuple(parse_wheel_formula(DEFAULT_WHEEL_FORMULA))
    )
    speed: float = 1.0

    @property
    def sensor_gaps(self) -> tuple[float, float, float, float]:
        """Distances between consecutive sensors."""
        return (self.d12, self.d23, self.d34, self.d45)


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Read settings from an INI file; missing files, sections and keys fall back to defaults."""
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.read(Path(path), encoding="utf-8")

    defaults = Settings()

    def value(section: str, key: str) -> str | None:
        if parser.has_option(section, key):
            return _unquote(parser.get(section, key))
        return None

    wheel_text = value("locomotive", "wheel_formula")
    wheel_formula = (
        tuple(parse_wheel_formula(wheel_text))
        if wheel_text is not None
        else defaults.wheel_formula
    )

    return Settings(
        d12=_to_float(value("distances", "d12"), defaults.d12),
        d23=_to_float(value("distances", "d23"), defaults.d23),
        d34=_to_float(value("distances", "d34"), defaults.d34),
        d45=_to_float(value("distances", "d45"), defaults.d45),
        wheel_formula=wheel_formula,
        speed=_to_float(value("locomotive", "speed"), defaults.speed),
    )