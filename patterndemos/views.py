"""Text views that redraw themselves whenever their model changes."""

from __future__ import annotations

import sys
from abc import abstractmethod
from typing import TextIO

from .controllers import Controller, TableController
from .model import Model, Observer


class View(Observer):
    """Base view: observes a model and redraws on every change."""

    def __init__(self, model: Model | None = None, stream: TextIO | None = None) -> None:
        self.model = model
        self.controller: Controller | None = None
        self._stream = stream
        if model is not None:
            model.register(self)

    def update(self) -> None:
        """Redraw after the model changed."""
        self.draw()

    @abstractmethod
    def draw(self) -> None:
        """Render the model's current state."""

    def _render(self, title: str) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        print(title, file=out)
        if self.model is None:
            print("Model is not set.", file=out, flush=True)
            return
        for party, vote in self.model.entries():
            print(f"{party}: {vote}", file=out)
        print(file=out, flush=True)


class BarChartView(View):
    """View listing the votes under a bar chart heading."""

    def draw(self) -> None:
        self._render("Drawing Bar Chart View")


class TableView(View):
    """View listing the votes as a table; it owns a table controller."""

    def __init__(self, model: Model | None = None, stream: TextIO | None = None) -> None:
        super().__init__(model, stream)
        if model is not None:
            self.controller = TableController(self)

    def draw(self) -> None:
        self._render("Drawing Table View")