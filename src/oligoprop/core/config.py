"""
Configuration for oligonucleotide property calculation.

Options can be given as keyword arguments, as an OligoConfig instance or
loaded from a YAML file. Unset options fall back to the defaults below;
only explicitly supplied values are range-checked against the sequence
length, so the defaults remain usable for very short oligos.

Example YAML:

    oligoprop:
      salt: 0.1
      primer_conc: 2.5e-7
      temperature: 37
      hairpin_min_stem: 5
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, fields, replace
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from oligoprop.core.errors import InvalidConfiguration
from oligoprop.core.result import Result, Ok, Err

logger = logging.getLogger(__name__)


DEFAULT_SALT = 0.05  # M
DEFAULT_PRIMER_CONC = 50e-6  # M
DEFAULT_TEMPERATURE = 25.0  # °C
DEFAULT_HAIRPIN_MIN_STEM = 4
DEFAULT_HAIRPIN_MIN_LOOP = 2
DEFAULT_DIMER_MIN_LENGTH = 4

# Accepted spellings for each option (matched case-insensitively)
_ALIASES = {
    "salt": "salt",
    "primer_conc": "primer_conc",
    "primerconc": "primer_conc",
    "temperature": "temperature",
    "temp": "temperature",
    "hairpin_min_stem": "hairpin_min_stem",
    "hpbase": "hairpin_min_stem",
    "hp_base": "hairpin_min_stem",
    "hairpin_min_loop": "hairpin_min_loop",
    "hploop": "hairpin_min_loop",
    "hp_loop": "hairpin_min_loop",
    "dimer_min_length": "dimer_min_length",
    "dimerlength": "dimer_min_length",
    "dimer_length": "dimer_min_length",
}


@dataclass(frozen=True, slots=True)
class AnalysisSettings:
    """Fully resolved, validated settings used by the calculators."""
    salt: float = DEFAULT_SALT
    primer_conc: float = DEFAULT_PRIMER_CONC
    temperature: float = DEFAULT_TEMPERATURE
    hairpin_min_stem: int = DEFAULT_HAIRPIN_MIN_STEM
    hairpin_min_loop: int = DEFAULT_HAIRPIN_MIN_LOOP
    dimer_min_length: int = DEFAULT_DIMER_MIN_LENGTH


@dataclass(frozen=True, slots=True)
class OligoConfig:
    """
    User-facing options; None means "use the default".

    Attributes:
        salt: Salt concentration in mol/L (> 0)
        primer_conc: Primer concentration in mol/L (> 0)
        temperature: Temperature in °C for ΔG
        hairpin_min_stem: Minimum paired bases in a hairpin stem
        hairpin_min_loop: Minimum unpaired bases in a hairpin loop
        dimer_min_length: Minimum consecutive aligned bases for a self-dimer
    """
    salt: Optional[float] = None
    primer_conc: Optional[float] = None
    temperature: Optional[float] = None
    hairpin_min_stem: Optional[int] = None
    hairpin_min_loop: Optional[int] = None
    dimer_min_length: Optional[int] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> OligoConfig:
        """
        Build a config from a plain mapping (e.g. parsed YAML).

        Raises:
            InvalidConfiguration: for unknown option names
        """
        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(str(key).lower())
            if name is None:
                raise InvalidConfiguration(str(key), "unknown option")
            values[name] = value
        return cls(**values)

    def merged(self, **overrides: Any) -> OligoConfig:
        """Return a copy with the non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **OligoConfig.from_mapping(updates).as_dict()) if updates else self

    def as_dict(self) -> dict[str, Any]:
        """Explicitly set options only."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def validate(self, length: int) -> Result[AnalysisSettings, InvalidConfiguration]:
        """
        Check every explicitly set option and resolve defaults.

        Args:
            length: Length of the sequence the settings will be used with

        Returns:
            Ok(AnalysisSettings) with concrete values
            Err(InvalidConfiguration) naming the first offending option
        """
        checks = (
            ("salt", _positive_real),
            ("primer_conc", _positive_real),
            ("temperature", _finite_real),
            *(
                (name, lambda n, v: _length_bound(n, v, length))
                for name in ("hairpin_min_stem", "hairpin_min_loop", "dimer_min_length")
            ),
        )

        resolved: dict[str, Any] = {}
        for name, check in checks:
            value = getattr(self, name)
            if value is None:
                continue
            result = check(name, value)
            if result.is_err():
                return result
            resolved[name] = result.unwrap()

        settings = AnalysisSettings(**resolved)
        logger.debug(f"Resolved settings: {settings}")
        return Ok(settings)


def _finite_real(name: str, value: Any) -> Result[float, InvalidConfiguration]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return Err(InvalidConfiguration(name, f"must be a real number, got {value!r}"))
    if not math.isfinite(value):
        return Err(InvalidConfiguration(name, f"must be finite, got {value!r}"))
    return Ok(float(value))


def _positive_real(name: str, value: Any) -> Result[float, InvalidConfiguration]:
    def check(v: float) -> Result[float, InvalidConfiguration]:
        if v <= 0:
            return Err(InvalidConfiguration(name, f"must be > 0 mol/L, got {value!r}"))
        return Ok(v)

    return _finite_real(name, value).and_then(check)


def _length_bound(name: str, value: Any, length: int) -> Result[int, InvalidConfiguration]:
    if isinstance(value, bool) or not isinstance(value, Integral):
        return Err(InvalidConfiguration(name, f"must be an integer, got {value!r}"))
    if not 1 < value < length:
        return Err(InvalidConfiguration(
            name, f"must satisfy 1 < value < {length} (sequence length), got {value}"
        ))
    return Ok(int(value))


def load_config(config_path: Path | str) -> Result[OligoConfig, str]:
    """
    Load options from a YAML file.

    The file may hold the options at top level or under an ``oligoprop``
    section.

    Args:
        config_path: Path to YAML config

    Returns:
        Ok(OligoConfig) on success, Err(message) on failure
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return Err(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        return Err(f"Failed to parse config: {e}")

    if not isinstance(data, dict):
        return Err(f"Config must be a mapping, got {type(data).__name__}")
    if isinstance(data.get("oligoprop"), dict):
        data = data["oligoprop"]

    try:
        config = OligoConfig.from_mapping(data)
    except InvalidConfiguration as e:
        return Err(str(e))

    logger.info(f"Loaded config from {config_path}: {config.as_dict()}")
    return Ok(config)
