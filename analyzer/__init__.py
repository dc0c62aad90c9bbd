"""
analyzer package

Classification of source addresses and destination ports.
"""

from analyzer.address import AddressClass, AddressClassifier
from analyzer.services import ServiceCatalog, UNKNOWN_SERVICE

__all__ = ["AddressClass", "AddressClassifier", "ServiceCatalog", "UNKNOWN_SERVICE"]
