"""CLI entry point.

Usage:
    iperfer -c -h <hostname> -p <port> -t <seconds>
    iperfer -s -p <port>
"""

import sys
from typing import Optional

from cli.constants import ERROR_PREFIX, LOG_COMPONENTS, RECEIVED_LABEL, SENT_LABEL
from cli.models import Mode, RunConfig
from cli.parser import parse_args
from common.logging_config import get_logger, setup_logging
from iperfer.exceptions import IperferError
from iperfer.receiver import run_receiver
from iperfer.sender import run_sender

logger = get_logger(__name__)


def run(config: RunConfig) -> str:
    """Run the configured role and return its report line."""
    if config.mode is Mode.SENDER:
        result = run_sender(config.host, config.port, config.duration_seconds)
        return result.format_line(SENT_LABEL)
    else:
        result = run_receiver(config.port)
        return result.format_line(RECEIVED_LABEL)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for CLI.

    Prints exactly one line on stdout: the result, or an error.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:]

    Returns:
        Process exit status: 0 on success, 1 on any error
    """
    if argv is None:
        argv = sys.argv[1:]

    for component in LOG_COMPONENTS:
        setup_logging(component)

    try:
        config = parse_args(argv)
        logger.info(f"Starting {config.mode.value} on port {config.port}")
        line = run(config)
    except IperferError as e:
        logger.debug(f"Run failed: {type(e).__name__}")
        print(f"{ERROR_PREFIX}{e}")
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
