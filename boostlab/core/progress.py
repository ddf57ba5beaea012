from __future__ import annotations

"""Progress reporting for long-running fits.

Training must remain runnable without any specific UI. ``fit`` optionally
accepts a progress callback and reports one step per boosting round; when
none is given, :class:`NullProgress` absorbs the calls.
"""

from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...


class NullProgress:
    def init(self, *, total: int, label: Optional[str] = None) -> None:
        pass

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        pass

    def finalize(self, *, label: Optional[str] = None) -> None:
        pass
