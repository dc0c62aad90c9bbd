"""
formatter.py

Renders the console alert line.
"""

from parser.events import ParsedBlockEvent


ALERT_TEMPLATE = (
    "ALERT: Blocked traffic detected from {ip} ({location}) "
    "targeting port {port} ({service}) over {protocol}."
)


def format_alert(event: ParsedBlockEvent, location: str, service: str) -> str:
    """Compose the alert line for a block event."""
    return ALERT_TEMPLATE.format(
        ip=event.source_address,
        location=location,
        port=event.destination_port,
        service=service,
        protocol=event.protocol.upper(),
    )
