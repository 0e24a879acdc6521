"""Registries mapping config keys to implementations.

The core idea is:
- add a new implementation
- register it
- the rest of the system stays closed for modification
"""

from .models import make_model_builder, register_model_builder, list_model_algos
from .splitters import make_splitter, register_splitter, list_split_modes
from .metrics import make_metrics, register_metric, list_metric_names
