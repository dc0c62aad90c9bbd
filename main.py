"""
main.py

Entry point: builds the long-lived resources and runs the syslog listener.
"""

import argparse
import sys

from tabulate import tabulate
from colorama import Fore, Style, just_fix_windows_console

from alerts.notifier import Notifier
from analyzer.services import ServiceCatalog
from enrichment.geolocator import GeoLocator
from listener.pipeline import AlertPipeline
from listener.udp_listener import Listener, ListenerBindError
from utils import app_logger, config
from utils.logger import LoggerSetup


def setup_argument_parser() -> argparse.ArgumentParser:
    """Configure command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="BlockWatch - Firewall block alerting daemon",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Listen on UDP 514 (requires privileges)
  %(prog)s -P 5514                      # Listen on an unprivileged port
  %(prog)s --no-sound -q                # Alerts only, no sound, warnings and up
  %(prog)s --list-services              # Show the well-known port table
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default=config.get("listen.host", "0.0.0.0"),
        help="Address to bind (default: 0.0.0.0)"
    )

    parser.add_argument(
        "-P", "--port",
        type=int,
        default=config.get("listen.port", 514),
        help="UDP port to listen on (default: 514)"
    )

    parser.add_argument(
        "--geo-endpoint",
        type=str,
        default=config.get("geolocation.endpoint", "http://ip-api.com/json/"),
        help="Base URL of the geolocation service"
    )

    parser.add_argument(
        "--geo-timeout",
        type=float,
        default=config.get("geolocation.timeout", 5),
        help="Geolocation request timeout in seconds"
    )

    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Disable the audible alert"
    )

    parser.add_argument(
        "--list-services",
        action="store_true",
        help="List the well-known service ports and exit"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-essential output"
    )

    return parser


def list_services(catalog: ServiceCatalog) -> None:
    """Display the service catalog and exit."""
    rows = sorted(catalog.items())
    print(f"\n{Fore.CYAN}Well-known Service Ports:{Style.RESET_ALL}")
    print(tabulate(rows, headers=["Port", "Service"], tablefmt="grid"))


def main(argv=None) -> int:
    """Main execution function."""
    just_fix_windows_console()
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.list_services:
        list_services(ServiceCatalog())
        return 0

    LoggerSetup.set_verbosity(verbose=args.verbose, quiet=args.quiet)

    locator = GeoLocator(endpoint=args.geo_endpoint, timeout=args.geo_timeout)
    notifier = Notifier(enabled=False if args.no_sound else None)
    pipeline = AlertPipeline(locator=locator, notifier=notifier)
    listener = Listener(pipeline, host=args.host, port=args.port)

    try:
        app_logger.info("=== BlockWatch Started ===")
        listener.bind()

        if not args.quiet:
            print(f"{Fore.CYAN}[i]{Style.RESET_ALL} Listening for syslog events on "
                  f"UDP port {Fore.YELLOW}{listener.address[1]}{Style.RESET_ALL}...")

        listener.serve_forever()
        return 0

    except ListenerBindError as e:
        print(f"\n{Fore.RED}[!] Startup failed:{Style.RESET_ALL} {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        app_logger.warning("Interrupted by user")
        listener.stop()
        listener.close()
        if not args.quiet:
            print(f"\n{Fore.YELLOW}[!] Stopped{Style.RESET_ALL}")
        return 130

    finally:
        locator.close()


if __name__ == "__main__":
    sys.exit(main())
