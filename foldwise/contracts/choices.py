from __future__ import annotations

"""Literal-based choice sets shared by config contracts."""

from typing import Literal

ProblemKind = Literal["regression", "classification"]

RegressionMetricName = Literal["rmse", "mse", "mae", "r2", "explained_variance"]

ClassificationMetricName = Literal[
    "accuracy",
    "balanced_accuracy",
    "f1_macro",
    "precision_macro",
    "recall_macro",
    "roc_auc",
    "log_loss",
]

MetricName = Literal[RegressionMetricName, ClassificationMetricName]

DatasetName = Literal["diabetes", "breast_cancer"]

KNNWeights = Literal["uniform", "distance"]
KNNAlgorithm = Literal["auto", "ball_tree", "kd_tree", "brute"]
MaxFeaturesName = Literal["sqrt", "log2"]
ClassTreeCriterion = Literal["gini", "entropy", "log_loss"]
RegTreeCriterion = Literal["squared_error", "absolute_error", "friedman_mse", "poisson"]
PenaltyName = Literal["l1", "l2", "elasticnet"]
LogRegSolver = Literal["lbfgs", "liblinear", "saga", "newton-cg", "sag"]

__all__ = [
    "ProblemKind",
    "RegressionMetricName",
    "ClassificationMetricName",
    "MetricName",
    "DatasetName",
    "KNNWeights",
    "KNNAlgorithm",
    "MaxFeaturesName",
    "ClassTreeCriterion",
    "RegTreeCriterion",
    "PenaltyName",
    "LogRegSolver",
]
