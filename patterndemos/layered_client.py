"""Client that assembles the three-layer stack and asks the top layer for service."""

from __future__ import annotations

import argparse
import threading
from typing import TextIO

from .layers import DataLink, Session, Transport


class Client:
    """Owns one layer of each kind and wires them into a stack."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.data_link = DataLink(stream)
        self.transport = Transport(stream)
        self.session = Session(stream)

    def run(self) -> None:
        """Connect the layers top to bottom and request the layer 3 service."""
        self.transport.set_lower_layer(self.data_link)
        self.session.set_lower_layer(self.transport)
        self.session.l3_service()


def main(argv: list[str] | None = None) -> int:
    """Run the layered stack once, then stay idle until interrupted."""
    parser = argparse.ArgumentParser(
        prog="patterndemos-layers",
        description="Pass a service request down a three-layer stack.",
    )
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="exit after the request instead of idling until interrupted",
    )
    args = parser.parse_args(argv)
    Client().run()
    if args.no_wait:
        return 0
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())