"""
events.py

Defines the transient event structures that flow through the alert pipeline.
Nothing here outlives the processing of a single datagram.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Tuple


PROTOCOLS = ("tcp", "udp", "unknown")


@dataclass(frozen=True)
class RawEvent:
    """
    A decoded datagram payload and the endpoint it came from.
    """
    payload: str
    sender: Tuple[str, int] = ("", 0)


@dataclass(frozen=True)
class ParsedBlockEvent:
    """
    Emitted when a payload reports a blocked connection attempt.
    """
    source_address: IPv4Address
    destination_port: int
    protocol: str = "unknown"

    def __post_init__(self):
        if self.source_address is None:
            raise ValueError("source_address is required")
        if not 0 < self.destination_port <= 65535:
            raise ValueError(f"destination_port out of range: {self.destination_port}")
        if self.protocol not in PROTOCOLS:
            raise ValueError(f"Unsupported protocol: {self.protocol}")
