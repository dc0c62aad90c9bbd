"""
listener package

UDP receive loop and the per-datagram alert pipeline.
"""

from listener.pipeline import AlertPipeline
from listener.udp_listener import Listener, ListenerBindError

__all__ = ["AlertPipeline", "Listener", "ListenerBindError"]
