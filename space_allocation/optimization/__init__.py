from .base_strategy import BaseSuggestionStrategy
from .compress_strategy import CompressStrategy, compress_positions
from .redistribute_strategy import RedistributeStrategy
from .optimization_advisor import generate_optimization_suggestions

__all__ = [
    'BaseSuggestionStrategy', 'CompressStrategy', 'RedistributeStrategy',
    'compress_positions', 'generate_optimization_suggestions',
]
