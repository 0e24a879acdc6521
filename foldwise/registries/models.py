from __future__ import annotations

from typing import Any, Callable, Optional

from foldwise.components.interfaces import ModelBuilder
from foldwise.registries.base import Registry

ModelBuilderFactory = Callable[[Any, Optional[int]], ModelBuilder]

_MODELS: Registry[str, ModelBuilderFactory] = Registry(_name="models")

_BUILTINS_LOADED = False


def register_model_builder(algo: str) -> Callable[[ModelBuilderFactory], ModelBuilderFactory]:
    return _MODELS.register(algo.lower())


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from foldwise.registries.builtins import models as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_model_builder(cfg: Any, *, seed: Optional[int] = None) -> ModelBuilder:
    _ensure_builtins()
    algo = getattr(cfg, "algo", None)
    factory = _MODELS.get(str(algo).lower())
    return factory(cfg, seed)


def list_model_algos() -> list[str]:
    _ensure_builtins()
    return _MODELS.keys()
