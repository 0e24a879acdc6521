from .classification import ForestBuilder, KNNBuilder, LogRegBuilder
from .regression import KNNRegressorBuilder, LinRegBuilder, RandomForestRegressorBuilder

__all__ = [
    "ForestBuilder",
    "KNNBuilder",
    "LogRegBuilder",
    "KNNRegressorBuilder",
    "LinRegBuilder",
    "RandomForestRegressorBuilder",
]
