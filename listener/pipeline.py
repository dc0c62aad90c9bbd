"""
pipeline.py

Sequences the per-datagram steps: filter, parse, classify, locate, render, notify.
"""

from typing import Callable, Optional

from alerts.formatter import format_alert
from alerts.notifier import Notifier
from analyzer.address import AddressClassifier
from analyzer.services import ServiceCatalog
from enrichment.geolocator import GeoLocator
from parser.syslog_parser import BlockMessageParser
from utils import app_logger


class AlertPipeline:
    """
    Turns one payload into at most one alert line. Holds no state between calls.
    """

    def __init__(
        self,
        locator: GeoLocator,
        notifier: Notifier,
        parser: Optional[BlockMessageParser] = None,
        classifier: Optional[AddressClassifier] = None,
        catalog: Optional[ServiceCatalog] = None,
        emit: Callable[[str], None] = print,
    ) -> None:
        self.locator = locator
        self.notifier = notifier
        self.parser = parser or BlockMessageParser()
        self.classifier = classifier or AddressClassifier()
        self.catalog = catalog or ServiceCatalog()
        self.emit = emit
        self.logger = app_logger

    def process(self, payload: str) -> Optional[str]:
        """
        Run a payload through the pipeline.

        Returns:
            The alert line that was emitted, or None if the payload was
            filtered out. Unexpected errors propagate to the caller.
        """
        event = self.parser.extract(payload)
        if event is None:
            return None

        if not self.classifier.is_public(event.source_address):
            self.logger.debug(f"Ignoring block from non-public address {event.source_address}")
            return None

        location = self.locator.locate(event.source_address)
        service = self.catalog.describe(event.destination_port)

        alert = format_alert(event, location, service)
        self.emit(alert)
        self.notifier.notify()

        return alert
