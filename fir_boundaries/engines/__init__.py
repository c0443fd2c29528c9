from .base import Mode, ModeEngine, check_duplicate_bases
from .strict import ValidationEngine, misplaced_extensions
from .fix import NormalizationEngine
from .factory import EngineFactory

EngineFactory.register_engine(Mode.STRICT, ValidationEngine)
EngineFactory.register_engine(Mode.FIX, NormalizationEngine)

__all__ = [
    'Mode',
    'ModeEngine',
    'ValidationEngine',
    'NormalizationEngine',
    'EngineFactory',
    'check_duplicate_bases',
    'misplaced_extensions',
]
