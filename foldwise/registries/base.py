from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, TypeVar

from foldwise.core.errors import InvalidArgument

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Name -> factory table shared by the model, splitter and metric registries.

        _SPLITTERS = Registry[str, SplitterFactory](_name="splitters")

        @_SPLITTERS.register("kfold")
        def _kfold(cfg, seed):
            ...

    Keys are unique; registering a taken key needs ``replace=True``.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K, *, replace: bool = False) -> Callable[[V], V]:
        if key in self._items and not replace:
            raise InvalidArgument(f"{self._name}: {key!r} is already registered")

        def deco(value: V) -> V:
            self._items[key] = value
            return value

        return deco

    def get(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            raise InvalidArgument(
                f"{self._name}: unknown key {key!r}; known: {self.keys()}"
            ) from None

    def keys(self) -> List[K]:
        return sorted(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items
