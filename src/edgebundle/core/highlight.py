"""
Highlight State Machine.

Owns the set of locked leaf identifiers for one session and recomputes
the emphasis of every link and label whenever that set changes.

States:
    UNLOCKED - no leaf is locked; every link neutral, every label normal.
    LOCKED   - at least one leaf is locked; links touching a locked leaf are
               emphasized, all others dimmed; locked labels are bold.

Transitions:
    LabelClicked(leaf_id) - toggle leaf_id in the lock set.
    BackgroundClicked()   - clear the lock set.

Recomputing is a pure function of the lock set over the links and leaves
the machine was created with. It never touches the graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, FrozenSet, Iterable, Iterator, List, Sequence, Set, Tuple, Union

from .hierarchy import HierarchyNode
from .projection import LinkRecord
from .types import Emphasis, LabelWeight

logger = logging.getLogger(__name__)


class LockState(StrEnum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"


@dataclass(frozen=True)
class LabelClicked:
    """A leaf label was clicked. Must not also count as a background click."""
    leaf_id: str


@dataclass(frozen=True)
class BackgroundClicked:
    """Empty space of the drawing was clicked."""


InteractionEvent = Union[LabelClicked, BackgroundClicked]


class LockSet:
    """Leaf identifiers currently locked by the user."""

    def __init__(self, initial: Iterable[str] = ()):
        self._ids: Set[str] = set(initial)

    def toggle(self, leaf_id: str) -> bool:
        """Add `leaf_id` if absent, remove it if present. Returns the new membership."""
        if leaf_id in self._ids:
            self._ids.discard(leaf_id)
            return False
        self._ids.add(leaf_id)
        return True

    def clear(self) -> None:
        self._ids.clear()

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._ids)

    def __contains__(self, leaf_id: object) -> bool:
        return leaf_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))

    def __repr__(self) -> str:
        return f"LockSet({sorted(self._ids)!r})"


@dataclass(frozen=True)
class HighlightFrame:
    """
    Emphasis of every link and label for one lock set.

    `links` is aligned with the machine's link sequence and `labels` with its
    leaf sequence.
    """
    locked: FrozenSet[str]
    links: Tuple[Emphasis, ...]
    labels: Tuple[LabelWeight, ...]

    @property
    def state(self) -> LockState:
        return LockState.LOCKED if self.locked else LockState.UNLOCKED


def compute_frame(
    locked: FrozenSet[str],
    links: Sequence[LinkRecord],
    leaves: Sequence[HierarchyNode],
) -> HighlightFrame:
    """Emphasis assignment for a given lock set."""
    if not locked:
        return HighlightFrame(
            locked=locked,
            links=tuple(Emphasis.NEUTRAL for _ in links),
            labels=tuple(LabelWeight.NORMAL for _ in leaves),
        )

    return HighlightFrame(
        locked=locked,
        links=tuple(
            Emphasis.EMPHASIZED
            if link.source.id in locked or link.target.id in locked
            else Emphasis.DIMMED
            for link in links
        ),
        labels=tuple(
            LabelWeight.BOLD if leaf.id in locked else LabelWeight.NORMAL
            for leaf in leaves
        ),
    )


FrameListener = Callable[[HighlightFrame], None]


class HighlightStateMachine:
    """
    Session-scoped lock/highlight controller.

    Each instance owns its own `LockSet`; independent visualizations never
    share lock state. Listeners receive every recomputed frame, which is how
    a drawing layer applies opacity and font weight.
    """

    def __init__(
        self,
        links: Sequence[LinkRecord],
        leaves: Sequence[HierarchyNode],
        locked: Iterable[str] = (),
    ):
        self.links: Tuple[LinkRecord, ...] = tuple(links)
        self.leaves: Tuple[HierarchyNode, ...] = tuple(leaves)
        self.lock_set = LockSet(locked)
        self._listeners: List[FrameListener] = []
        self._frame = compute_frame(self.lock_set.snapshot(), self.links, self.leaves)

    @property
    def frame(self) -> HighlightFrame:
        """The most recently computed frame."""
        return self._frame

    @property
    def state(self) -> LockState:
        return self._frame.state

    def subscribe(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    # =========================================================================
    # Transitions
    # =========================================================================

    def click_label(self, leaf_id: str) -> HighlightFrame:
        """Toggle the lock on one leaf."""
        now_locked = self.lock_set.toggle(leaf_id)
        logger.debug(f"{'Locked' if now_locked else 'Unlocked'} '{leaf_id}'")
        return self.recompute()

    def click_background(self) -> HighlightFrame:
        """Clear every lock."""
        if len(self.lock_set):
            logger.debug(f"Clearing {len(self.lock_set)} lock(s)")
        self.lock_set.clear()
        return self.recompute()

    def dispatch(self, event: InteractionEvent) -> HighlightFrame:
        """Route an interaction event to its transition."""
        if isinstance(event, LabelClicked):
            return self.click_label(event.leaf_id)
        if isinstance(event, BackgroundClicked):
            return self.click_background()
        raise TypeError(f"Unsupported interaction event: {event!r}")

    def recompute(self) -> HighlightFrame:
        """Re-evaluate every link and label, then notify listeners."""
        self._frame = compute_frame(self.lock_set.snapshot(), self.links, self.leaves)
        for listener in self._listeners:
            listener(self._frame)
        return self._frame
