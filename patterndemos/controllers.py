"""Controllers that turn user events into changes of a model."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from .model import Observer

_PARTY_BY_EVENT = {1: "Party A", 2: "Party B", 3: "Party C"}
_CLEAR_EVENT = 9


class Controller(Observer):
    """Base controller bound to a view and, through it, to the view's model."""

    def __init__(self, view: Any = None) -> None:
        self.view = view
        self.model = view.model if view is not None else None
        if self.model is not None:
            self.model.register(self)

    def update(self) -> None:
        """Controllers take no action when the model changes."""

    @abstractmethod
    def handle_event(self, event: int) -> None:
        """Act on a user event."""


class TableController(Controller):
    """Controller for the table view: casts votes and clears them."""

    def update(self) -> None:
        """The table controller takes no action when the model changes."""

    def handle_event(self, event: int) -> None:
        """Vote for party A, B or C on events 1, 2 or 3; clear all votes on 9."""
        if self.model is None:
            raise RuntimeError("controller is not attached to a model")
        party = _PARTY_BY_EVENT.get(event)
        if party is not None:
            self.model.add_vote(1, party)
        elif event == _CLEAR_EVENT:
            self.model.clear_votes()