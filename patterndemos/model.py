"""Vote storage that notifies registered observers of every change."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear about changes to a model."""

    @abstractmethod
    def update(self) -> None:
        """React to a change in the observed model."""


class Model:
    """Holds the votes cast so far and tells its observers when they change."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._entries: list[tuple[str, int]] = []

    def register(self, observer: Observer) -> None:
        """Add an observer; registering it again makes it hear every change twice."""
        self._observers.append(observer)

    def unregister(self, observer: Observer) -> None:
        """Remove every registration of the observer; unknown observers are ignored."""
        self._observers = [known for known in self._observers if known is not observer]

    def add_vote(self, vote: int, party: str) -> None:
        """Record a vote for a party and notify the observers."""
        self._entries.append((party, vote))
        self._notify()

    def clear_votes(self) -> None:
        """Drop all recorded votes and notify the observers."""
        self._entries.clear()
        self._notify()

    def entries(self) -> list[tuple[str, int]]:
        """Return the recorded votes as (party, vote) pairs in the order cast."""
        return list(self._entries)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer.update()