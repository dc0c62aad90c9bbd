"""
syslog_parser.py

Heuristic filter and field extractor for firewall block notifications.
The payload is treated as an opaque comma-delimited string, not a syslog record.
"""

import re
from ipaddress import IPv4Address, AddressValueError
from typing import Optional

from parser.events import ParsedBlockEvent
from utils import app_logger


BLOCK_MARKER = "block"

_PORT_TOKEN = re.compile(r"^[+-]?\d+$", re.ASCII)
_IPV4_TOKEN = re.compile(r"^\d{1,3}(?:\.\d{1,3}){3}$", re.ASCII)


class BlockMessageParser:
    """
    Decides whether a payload describes blocked traffic and extracts
    (source address, destination port, protocol) from it.
    """

    def __init__(self, marker: str = BLOCK_MARKER):
        self.marker = marker
        self.logger = app_logger

    def is_block_message(self, payload: str) -> bool:
        """Case-sensitive substring check for the block marker."""
        return self.marker in payload

    def extract(self, payload: str) -> Optional[ParsedBlockEvent]:
        """Filter then parse. Returns None for anything that is not a usable block event."""
        if not self.is_block_message(payload):
            return None
        return self.parse(payload)

    def parse(self, payload: str) -> Optional[ParsedBlockEvent]:
        """
        Extract fields from a comma-delimited payload.

        The first IPv4 token wins the source address; the last integer token
        in (0, 65535] wins the port; the last tcp/udp token wins the protocol.

        Returns:
            ParsedBlockEvent, or None when the source or port is missing.
        """
        try:
            return self._parse_tokens(payload)
        except Exception as e:
            self.logger.debug(f"Discarding unparsable payload: {e}")
            return None

    def _parse_tokens(self, payload: str) -> Optional[ParsedBlockEvent]:
        source: Optional[IPv4Address] = None
        port = 0
        protocol = "unknown"

        for part in payload.split(","):
            token = part.strip()

            if source is None:
                address = _parse_ipv4(token)
                if address is not None:
                    source = address

            value = _parse_port(token)
            if value is not None:
                port = value

            if token.lower() in ("tcp", "udp"):
                protocol = token.lower()

        if source is None or port <= 0:
            self.logger.debug("Block message without source address or port, skipped")
            return None

        return ParsedBlockEvent(
            source_address=source,
            destination_port=port,
            protocol=protocol,
        )


def _parse_ipv4(token: str) -> Optional[IPv4Address]:
    if not _IPV4_TOKEN.match(token):
        return None
    try:
        return IPv4Address(token)
    except AddressValueError:
        return None


def _parse_port(token: str) -> Optional[int]:
    if not _PORT_TOKEN.match(token):
        return None
    value = int(token)
    if 0 < value <= 65535:
        return value
    return None
