from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

V = TypeVar("V")


@dataclass
class Registry(Generic[V]):
    """Name -> value mapping with case-insensitive keys.

    Typical usage:
        LEARNERS = Registry[WeakLearnerKind](_name="weak_learners")
        LEARNERS.register("stump")(WeakLearnerKind(...))
        entry = LEARNERS.get("Stump")

    Registering an existing name twice is an error unless ``replace=True``.
    """

    _items: Dict[str, V] = field(default_factory=dict)
    _name: str = "registry"

    @staticmethod
    def _key(name: str) -> str:
        return str(name).strip().lower()

    def register(self, name: str, *, replace: bool = False) -> Callable[[V], V]:
        key = self._key(name)

        def deco(value: V) -> V:
            if key in self._items and not replace:
                raise KeyError(f"{self._name}: {key!r} is already registered")
            self._items[key] = value
            return value

        return deco

    def get(self, name: str) -> V:
        key = self._key(name)
        if key not in self._items:
            raise KeyError(f"{self._name}: unknown key {key!r}")
        return self._items[key]

    def try_get(self, name: str, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(self._key(name), default)

    def names(self) -> Iterable[str]:
        return sorted(self._items)

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._items
