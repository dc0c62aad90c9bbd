"""
services.py

Static catalog of well-known destination ports.
"""

from types import MappingProxyType
from typing import ItemsView, Mapping


UNKNOWN_SERVICE = "Unknown Service"


class ServiceCatalog:
    """
    Read-only lookup from destination port to a human-readable service name.
    """

    SERVICES: Mapping[int, str] = MappingProxyType({
        # File transfer and remote shells
        20: "FTP Data Transfer",
        21: "FTP Control",
        22: "SSH (Secure Shell)",
        23: "Telnet",

        # Mail
        25: "SMTP (Email Sending)",
        110: "POP3 (Email Retrieval)",
        143: "IMAP (Email Retrieval)",
        465: "SMTP (Secure Email Sending)",
        587: "SMTP (Submission)",
        993: "IMAPS (Secure IMAP)",
        995: "POP3S (Secure POP3)",

        # Core network services
        53: "DNS (Domain Name System)",
        123: "NTP (Network Time Protocol)",
        137: "NetBIOS Name Service",
        138: "NetBIOS Datagram Service",
        139: "NetBIOS Session Service",
        161: "SNMP (Simple Network Management Protocol)",
        162: "SNMP Trap",
        179: "BGP (Border Gateway Protocol)",
        194: "IRC (Internet Relay Chat)",
        500: "IKE (Internet Key Exchange)",
        514: "Syslog",
        520: "RIP (Routing Information Protocol)",
        1900: "SSDP (UPnP)",

        # Web
        80: "HTTP (Web Traffic)",
        443: "HTTPS (Secure Web Traffic)",
        3128: "HTTP Proxy",
        5000: "UPnP / Web Services",
        8080: "HTTP Proxy / Web Traffic",
        8443: "HTTPS (Alternative Port)",
        9000: "SonarQube",
        9090: "HTTP Alternative",
        10000: "Webmin",

        # File sharing, directory and printing
        445: "SMB (Windows File Sharing)",
        554: "RTSP (Streaming Protocol)",
        593: "RPC over HTTP",
        631: "IPP (Internet Printing Protocol)",
        636: "LDAPS (Secure LDAP)",
        873: "rsync",
        1025: "Microsoft RPC",
        2049: "NFS (Network File System)",
        3268: "Global Catalog (LDAP)",
        3690: "Subversion",

        # VPN and proxies
        1080: "SOCKS Proxy",
        1194: "OpenVPN",
        1723: "PPTP (VPN)",

        # Databases
        1433: "Microsoft SQL Server",
        1434: "Microsoft SQL Monitor",
        1521: "Oracle Database",
        3306: "MySQL Database",
        5432: "PostgreSQL Database",
        6379: "Redis Database",

        # Remote administration
        3389: "RDP (Remote Desktop Protocol)",
        3899: "Radmin (Remote Admin)",
        5631: "pcAnywhere",
        5900: "VNC Remote Desktop",
        5985: "Windows Remote Management (HTTP)",
        5986: "Windows Remote Management (HTTPS)",
        6000: "X11 Display Server",
    })

    def describe(self, port: int) -> str:
        """Return the service name for a port, or "Unknown Service"."""
        return self.SERVICES.get(port, UNKNOWN_SERVICE)

    def items(self) -> ItemsView[int, str]:
        return self.SERVICES.items()

    def __contains__(self, port: object) -> bool:
        return port in self.SERVICES

    def __len__(self) -> int:
        return len(self.SERVICES)
