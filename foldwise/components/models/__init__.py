from .fit import SklearnFit, make_fit

__all__ = ["SklearnFit", "make_fit"]
