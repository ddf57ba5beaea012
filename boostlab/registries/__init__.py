from .weak_learners import (
    decode_weak_learner,
    list_weak_learner_kinds,
    make_weak_learner_search,
    register_weak_learner,
)

__all__ = [
    "decode_weak_learner",
    "list_weak_learner_kinds",
    "make_weak_learner_search",
    "register_weak_learner",
]
