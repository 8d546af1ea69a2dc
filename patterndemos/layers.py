"""A three-layer protocol stack where each layer serves through the one below it."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class _Speaker:
    """Mixin giving a layer an output stream that defaults to standard output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _say(self, message: str) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        print(message, file=out, flush=True)


class L1Provider(ABC):
    """Interface of the lowest layer."""

    @abstractmethod
    def l1_service(self) -> None:
        """Perform the layer 1 service."""


class DataLink(_Speaker, L1Provider):
    """Layer 1 implementation that does its work directly."""

    def l1_service(self) -> None:
        """Report that the layer 1 work is done."""
        self._say("L1Service doing its job!")


class L2Provider(ABC):
    """Layer 2 base that relies on a layer 1 provider below it."""

    def __init__(self) -> None:
        self.lower: L1Provider | None = None

    @abstractmethod
    def l2_service(self) -> None:
        """Perform the layer 2 service."""

    def set_lower_layer(self, lower: L1Provider) -> None:
        """Attach the layer 1 provider this layer delegates to."""
        self.lower = lower

    def _require_lower(self) -> L1Provider:
        if self.lower is None:
            raise RuntimeError("layer 2 has no lower layer attached")
        return self.lower


class Transport(_Speaker, L2Provider):
    """Layer 2 implementation wrapping a call to layer 1."""

    def __init__(self, stream: TextIO | None = None) -> None:
        _Speaker.__init__(self, stream)
        L2Provider.__init__(self)

    def l2_service(self) -> None:
        """Announce the work, delegate to layer 1, then announce completion."""
        lower = self._require_lower()
        self._say("L2Service starting its job!")
        lower.l1_service()
        self._say("L2Service finishing its job!")


class L3Provider(ABC):
    """Layer 3 base that relies on a layer 2 provider below it."""

    def __init__(self) -> None:
        self.lower: L2Provider | None = None

    @abstractmethod
    def l3_service(self) -> None:
        """Perform the layer 3 service."""

    def set_lower_layer(self, lower: L2Provider) -> None:
        """Attach the layer 2 provider this layer delegates to."""
        self.lower = lower

    def _require_lower(self) -> L2Provider:
        if self.lower is None:
            raise RuntimeError("layer 3 has no lower layer attached")
        return self.lower


class Session(_Speaker, L3Provider):
    """Layer 3 implementation wrapping a call to layer 2."""

    def __init__(self, stream: TextIO | None = None) -> None:
        _Speaker.__init__(self, stream)
        L3Provider.__init__(self)

    def l3_service(self) -> None:
        """Announce the work, delegate to layer 2, then announce completion."""
        lower = self._require_lower()
        self._say("L3Service starting its job!")
        lower.l2_service()
        self._say("L3Service finishing its job!")