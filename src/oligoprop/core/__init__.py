"""
Core module for oligoprop.

Contains data models, the error taxonomy, configuration and the Result type.
"""

from oligoprop.core.errors import (
    OligoPropError,
    InvalidSymbol,
    InvalidConfiguration,
    ShortSequenceWarning,
)
from oligoprop.core.result import Result, Ok, Err, try_oligoprop
from oligoprop.core.models import (
    BoundedQuantity,
    SymbolCounts,
    OligoProperties,
    ThermoMethod,
    THERMO_METHODS,
    TM_LABELS,
)
from oligoprop.core.config import OligoConfig, AnalysisSettings, load_config

__all__ = [
    "OligoPropError",
    "InvalidSymbol",
    "InvalidConfiguration",
    "ShortSequenceWarning",
    "Result",
    "Ok",
    "Err",
    "try_oligoprop",
    "BoundedQuantity",
    "SymbolCounts",
    "OligoProperties",
    "ThermoMethod",
    "THERMO_METHODS",
    "TM_LABELS",
    "OligoConfig",
    "AnalysisSettings",
    "load_config",
]
