"""
udp_listener.py

Owns the UDP socket and runs the blocking receive loop.
Datagrams are processed one at a time, in arrival order.
"""

import socket
import threading
from typing import Optional, Tuple

from listener.pipeline import AlertPipeline
from parser.events import RawEvent
from utils import app_logger, config


class ListenerBindError(Exception):
    """Raised when the UDP socket cannot be bound."""
    pass


class Listener:
    """
    UDP syslog receiver feeding an AlertPipeline.

    Args:
        pipeline:    Pipeline invoked synchronously for every datagram
        host:        Bind address (default from config, "0.0.0.0")
        port:        UDP port (default from config, 514)
        buffer_size: Maximum datagram size read per receive
    """

    def __init__(
        self,
        pipeline: AlertPipeline,
        host: Optional[str] = None,
        port: Optional[int] = None,
        buffer_size: Optional[int] = None,
    ) -> None:
        self.pipeline = pipeline
        self.host = config.get("listen.host", "0.0.0.0") if host is None else host
        self.port = config.get("listen.port", 514) if port is None else port
        self.buffer_size = config.get("listen.buffer_size", 65535) if buffer_size is None else buffer_size
        self.logger = app_logger

        self._sock: Optional[socket.socket] = None
        self._stop = threading.Event()
        self.packets_received = 0
        self.alerts_emitted = 0
        self.errors = 0

    @property
    def address(self) -> Tuple[str, int]:
        """Actual bound address (useful when binding port 0)."""
        if self._sock is None:
            return (self.host, self.port)
        return self._sock.getsockname()

    def bind(self) -> None:
        """Open and bind the socket. Failure is fatal to startup."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.bind((self.host, self.port))
            sock.settimeout(1.0)   # Allow stop event to be checked
        except OSError as e:
            self.logger.error(f"Cannot bind UDP {self.host}:{self.port}: {e}")
            raise ListenerBindError(f"Cannot bind UDP {self.host}:{self.port}: {e}") from e

        self._sock = sock
        self.logger.info(f"Listening for syslog events on UDP {self.host}:{self.address[1]}")

    def serve_forever(self) -> None:
        """Receive and process datagrams until stop() is called."""
        if self._sock is None:
            self.bind()

        try:
            while not self._stop.is_set():
                try:
                    data, addr = self._sock.recvfrom(self.buffer_size)
                except socket.timeout:
                    continue
                except OSError as e:
                    if self._stop.is_set():
                        break
                    self._report_error(e)
                    continue

                self.handle_datagram(data, addr)
        finally:
            self.close()

    run = serve_forever

    def handle_datagram(self, data: bytes, addr: Tuple[str, int]) -> Optional[str]:
        """Process one datagram. Never raises."""
        self.packets_received += 1
        try:
            event = RawEvent(payload=data.decode("utf-8", errors="replace"), sender=addr)
            alert = self.pipeline.process(event.payload)
        except Exception as e:
            self._report_error(e)
            return None

        if alert is not None:
            self.alerts_emitted += 1
        return alert

    def _report_error(self, error: Exception) -> None:
        self.errors += 1
        print(f"Error: {error}")
        self.logger.debug("Datagram processing failed", exc_info=error)

    def stop(self) -> None:
        self._stop.set()

    def close(self) -> None:
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError:
            pass
        self._sock = None
        self.logger.info(
            f"Listener closed: packets={self.packets_received}, "
            f"alerts={self.alerts_emitted}, errors={self.errors}"
        )
