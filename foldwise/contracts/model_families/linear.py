from __future__ import annotations

from typing import ClassVar, Literal, Optional

from pydantic import BaseModel

from ..choices import LogRegSolver, PenaltyName


class LogRegConfig(BaseModel):
    algo: Literal["logreg"] = "logreg"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "linear"

    C: float = 1.0
    # None leaves the regularisation to the estimator default
    penalty: Optional[PenaltyName] = None
    solver: LogRegSolver = "lbfgs"
    max_iter: int = 1000
    l1_ratio: Optional[float] = None


class LinearRegConfig(BaseModel):
    algo: Literal["linreg"] = "linreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "linear"

    fit_intercept: bool = True
    copy_X: bool = True
    positive: bool = False
