"""foldwise: k-fold cross-validation over scikit-learn style models.

Most callers only need :mod:`foldwise.api`.
"""

__version__ = "0.1.0"
