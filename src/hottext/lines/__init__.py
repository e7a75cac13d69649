from .rng import PyRandomSource, RandomSource, SeededRandomSource, default_random_source
from .store import VariantStore

__all__ = [
    "PyRandomSource",
    "RandomSource",
    "SeededRandomSource",
    "VariantStore",
    "default_random_source",
]
