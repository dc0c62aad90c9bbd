"""
address.py

Public vs. private classification of source addresses.
"""

from enum import Enum
from ipaddress import IPv4Address, IPv4Network, IPv6Address, ip_address
from typing import Tuple, Union

from utils import app_logger


class AddressClass(Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class AddressClassifier:
    """
    Decides whether an address is routable on the open internet.
    Only PUBLIC addresses are worth alerting on.
    """

    PRIVATE_IPV4_NETWORKS: Tuple[IPv4Network, ...] = (
        IPv4Network("10.0.0.0/8"),
        IPv4Network("172.16.0.0/12"),
        IPv4Network("192.168.0.0/16"),
        IPv4Network("127.0.0.0/8"),
        IPv4Network("169.254.0.0/16"),
    )

    # Only the fd00::/8 half of unique-local space is excluded; fc00::/8 counts as public.
    IPV6_PRIVATE_PREFIX = "fd"

    def __init__(self):
        self.logger = app_logger

    def classify(self, address: Union[IPv4Address, IPv6Address, str, None]) -> AddressClass:
        """
        Classify an address.

        Args:
            address: IPv4Address, IPv6Address or its textual form

        Returns:
            AddressClass.PUBLIC or AddressClass.PRIVATE. Anything that is not
            a valid IPv4/IPv6 address is PRIVATE.
        """
        if isinstance(address, str):
            try:
                address = ip_address(address.strip())
            except ValueError:
                self.logger.debug(f"Not an IP address: {address!r}")
                return AddressClass.PRIVATE

        if isinstance(address, IPv4Address):
            if any(address in network for network in self.PRIVATE_IPV4_NETWORKS):
                return AddressClass.PRIVATE
            return AddressClass.PUBLIC

        if isinstance(address, IPv6Address):
            if address.is_link_local or address.is_site_local:
                return AddressClass.PRIVATE
            if str(address).startswith(self.IPV6_PRIVATE_PREFIX):
                return AddressClass.PRIVATE
            return AddressClass.PUBLIC

        return AddressClass.PRIVATE

    def is_public(self, address) -> bool:
        return self.classify(address) is AddressClass.PUBLIC
