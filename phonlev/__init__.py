"""phonlev - Bounded and phonetic Levenshtein distance over Unicode code points.

Main entry points are distance() and phonetic_distance().
"""

__version__ = "0.1.0"

# Observability exports for convenience
from phonlev.observ import get_logger, timer
from phonlev.errors import (
    PhonlevError,
    ErrorCode,
    ErrorDetail,
    ValidationError,
    InvalidArgumentError,
    InvalidSequenceError,
    ServiceError,
    HomophoneSourceError,
)
from phonlev.core import (
    VOICING_PAIRS,
    DistanceResult,
    identity_cost,
    phonetic_cost,
    to_symbols,
    distance,
    batch_distance,
)
from phonlev.storage import HomophoneIndex, NullHomophoneLookup, load_homophone_lookup
from phonlev.services import PhoneticService, get_phonetic_service, phonetic_distance

__all__ = [
    # Version
    "__version__",
    # Distance
    "distance",
    "batch_distance",
    "phonetic_distance",
    "to_symbols",
    "identity_cost",
    "phonetic_cost",
    "VOICING_PAIRS",
    "DistanceResult",
    "PhoneticService",
    "get_phonetic_service",
    # Homophones
    "HomophoneIndex",
    "NullHomophoneLookup",
    "load_homophone_lookup",
    # Logging
    "get_logger",
    "timer",
    # Errors
    "PhonlevError",
    "ErrorCode",
    "ErrorDetail",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidSequenceError",
    "ServiceError",
    "HomophoneSourceError",
]
