"""
oligoprop: physicochemical properties of short DNA oligonucleotides.

Computes GC content, molecular weight, six melting temperature estimates,
nearest-neighbor thermodynamics and potential hairpins and self-dimers for
a single oligo. Ambiguous N symbols are supported throughout; every
numeric result carries a midpoint and a delta.
"""

import logging

__version__ = "1.0.0"

# No log output unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from oligoprop.core.result import Result, Ok, Err
from oligoprop.core.errors import (
    OligoPropError,
    InvalidSymbol,
    InvalidConfiguration,
    ShortSequenceWarning,
)
from oligoprop.core.config import OligoConfig
from oligoprop.core.models import BoundedQuantity, OligoProperties, ThermoMethod
from oligoprop.properties import calculate_properties, calculate_properties_result

__all__ = [
    "__version__",
    "Result",
    "Ok",
    "Err",
    "OligoPropError",
    "InvalidSymbol",
    "InvalidConfiguration",
    "ShortSequenceWarning",
    "OligoConfig",
    "BoundedQuantity",
    "OligoProperties",
    "ThermoMethod",
    "calculate_properties",
    "calculate_properties_result",
]
