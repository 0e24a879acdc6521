from .datasets import load_csv, load_dataset, load_from_data_model, list_datasets

__all__ = ["load_csv", "load_dataset", "load_from_data_model", "list_datasets"]
