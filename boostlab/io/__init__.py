from .codec import dumps_state, from_state, load_state, loads_state, save_state, to_state

__all__ = [
    "to_state",
    "from_state",
    "dumps_state",
    "loads_state",
    "save_state",
    "load_state",
]
