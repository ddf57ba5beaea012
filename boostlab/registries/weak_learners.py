from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from boostlab.components.interfaces import WeakLearner, WeakLearnerSearch
from boostlab.core.errors import InvalidInput
from boostlab.registries.base import Registry


@dataclass(frozen=True)
class WeakLearnerKind:
    """How to search for one kind of weak learner and how to rebuild it from a record."""

    make_search: Callable[..., WeakLearnerSearch]
    decode: Callable[[Dict[str, Any]], WeakLearner]


_WEAK_LEARNERS: Registry[WeakLearnerKind] = Registry(_name="weak_learners")

_BUILTINS_LOADED = False


def register_weak_learner(kind: str, *, replace: bool = False) -> Callable[[WeakLearnerKind], WeakLearnerKind]:
    return _WEAK_LEARNERS.register(kind, replace=replace)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    _BUILTINS_LOADED = True
    from boostlab.registries import builtins as _  # noqa: F401


def get_weak_learner_kind(kind: str) -> WeakLearnerKind:
    _ensure_builtins()
    entry = _WEAK_LEARNERS.try_get(kind)
    if entry is None:
        raise InvalidInput(f"Unknown weak learner kind: {kind!r}; known: {list_weak_learner_kinds()}")
    return entry


def make_weak_learner_search(kind: str, *, n_jobs: Optional[int] = None) -> WeakLearnerSearch:
    return get_weak_learner_kind(kind).make_search(n_jobs=n_jobs)


def decode_weak_learner(kind: str, record: Dict[str, Any]) -> WeakLearner:
    return get_weak_learner_kind(kind).decode(record)


def list_weak_learner_kinds() -> List[str]:
    _ensure_builtins()
    return list(_WEAK_LEARNERS.names())
