"""
alerts package

Alert rendering and user notification.
"""

from alerts.formatter import format_alert
from alerts.notifier import Notifier

__all__ = ["format_alert", "Notifier"]
