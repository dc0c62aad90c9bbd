"""
parser package

Turns raw datagram payloads into block events.
"""

from parser.events import RawEvent, ParsedBlockEvent
from parser.syslog_parser import BlockMessageParser

__all__ = ["RawEvent", "ParsedBlockEvent", "BlockMessageParser"]
