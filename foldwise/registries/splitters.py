from __future__ import annotations

from typing import Callable, Optional

from foldwise.components.interfaces import Splitter
from foldwise.contracts.split_configs import SplitConfig
from foldwise.registries.base import Registry

SplitterFactory = Callable[[SplitConfig, Optional[int]], Splitter]

_SPLITTERS: Registry[str, SplitterFactory] = Registry(_name="splitters")

_BUILTINS_LOADED = False


def register_splitter(mode: str) -> Callable[[SplitterFactory], SplitterFactory]:
    return _SPLITTERS.register(mode.lower())


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from foldwise.registries.builtins import splitters as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_splitter(cfg: SplitConfig, *, seed: Optional[int] = None) -> Splitter:
    _ensure_builtins()
    mode = getattr(cfg, "mode", "kfold")
    factory = _SPLITTERS.get(str(mode).lower())
    return factory(cfg, seed)


def list_split_modes() -> list[str]:
    _ensure_builtins()
    return _SPLITTERS.keys()
