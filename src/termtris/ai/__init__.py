"""Board heuristics for an external search or training process."""

from .genes import Gene, Holes, MaxHeight, Bumpiness, WeightedFitness, column_heights

__all__ = [
    "Gene",
    "Holes",
    "MaxHeight",
    "Bumpiness",
    "WeightedFitness",
    "column_heights",
]
