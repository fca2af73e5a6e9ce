import argparse
import logging
import sys
from typing import List, Optional

from .check import check_alerts
from .config import PASSWORD_ENV, resolve_config
from .constants import NAME, VERSION, SOURCE_URL
from .errors import CheckError
from .log import setup_logging
from .nagios import NagiosState, UNKNOWN

logger = logging.getLogger(__name__)

class NagiosArgumentParser(argparse.ArgumentParser):
    """Usage errors are UNKNOWN (3); argparse's own exit code 2 would read as CRITICAL."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(NagiosState.unknown(f"{self.prog}: {message}").line())
        self.exit(UNKNOWN)

def build_parser() -> argparse.ArgumentParser:
    parser = NagiosArgumentParser(
        prog=NAME,
        description="Check HPE OneView for uncleared alerts (Nagios plugin)",
        epilog=f"The password may also be supplied via ${PASSWORD_ENV}.\n{SOURCE_URL}",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"{NAME} {VERSION}")

    target_group = parser.add_argument_group("Target")
    target_group.add_argument("-H", "--host", help="HPE OneView appliance to connect to")
    target_group.add_argument("-u", "--user", help="User name for login")
    target_group.add_argument("-p", "--password-file", help="File containing the password (first line is used)")

    tls_group = parser.add_argument_group("TLS")
    tls_group.add_argument("-c", "--ca-file", help="PEM file with an additional CA certificate to trust")
    tls_group.add_argument("-i", "--insecure", action="store_true",
                           help="Disable certificate and hostname verification (overrides --ca-file)")

    conf_group = parser.add_argument_group("Configuration")
    conf_group.add_argument("-C", "--config", help="YAML file with host/user/password_file/ca_file/insecure")
    conf_group.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        cfg = resolve_config(
            host=args.host,
            user=args.user,
            password_file=args.password_file,
            ca_file=args.ca_file,
            insecure=args.insecure,
            config_file=args.config,
        )
        verdict = check_alerts(cfg.host, cfg.user, cfg.password, cfg.ca_certificate, cfg.insecure)
        state = NagiosState.from_verdict(verdict)
    except CheckError as e:
        state = NagiosState.unknown(str(e))
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        state = NagiosState.unknown(f"Unexpected error: {type(e).__name__}: {e}")

    print(state.line())
    return state.exit_code

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
