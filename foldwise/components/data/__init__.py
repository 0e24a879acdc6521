from .dataset import Dataset, Resample

__all__ = ["Dataset", "Resample"]
