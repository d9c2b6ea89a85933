"""Sender role: stream fixed-size chunks to a receiver for a fixed duration."""

import socket
import time
from typing import Callable

from common.constants import CHUNK_SIZE
from common.logging_config import get_logger
from iperfer.exceptions import ConnectError, HostResolutionError
from iperfer.results import CHUNK, TransferResult

logger = get_logger(__name__)


def _open_connection(host: str, port: int) -> socket.socket:
    """
    Resolve host and connect to the first address that accepts.

    Raises:
        HostResolutionError: If the hostname does not resolve
        ConnectError: If no resolved address accepts the connection
    """
    # An empty hostname means the local host.
    try:
        addresses = socket.getaddrinfo(host or None, port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        logger.debug(f"Resolution failed for '{host}': {e}")
        raise HostResolutionError() from e

    last_error = None
    for family, sock_type, proto, _, sockaddr in addresses:
        sock = None
        try:
            sock = socket.socket(family, sock_type, proto)
            sock.connect(sockaddr)
        except OSError as e:
            logger.debug(f"Connect to {sockaddr[0]}:{sockaddr[1]} failed: {e}")
            if sock is not None:
                sock.close()
            last_error = e
            continue
        logger.info(f"Connected to {sockaddr[0]}:{sockaddr[1]}")
        return sock

    raise ConnectError() from last_error


def run_sender(
    host: str,
    port: int,
    duration_seconds: int,
    clock: Callable[[], float] = time.monotonic
) -> TransferResult:
    """
    Connect to a receiver and write chunks until the duration has passed.

    The deadline is checked before each chunk, never mid-chunk, so the
    run lasts at least duration_seconds. Elapsed time is measured after the
    write half is shut down and is what the rate is computed over.

    Args:
        host: Receiver hostname or address
        port: Receiver port
        duration_seconds: Minimum send window in seconds
        clock: Monotonic time source in seconds

    Returns:
        TransferResult with bytes written and measured elapsed time

    Raises:
        HostResolutionError: If host cannot be resolved
        ConnectError: If connecting or writing fails
    """
    with _open_connection(host, port) as sock:
        total_bytes = 0
        start = clock()
        deadline = start + duration_seconds

        try:
            while clock() < deadline:
                sock.sendall(CHUNK)
                total_bytes += CHUNK_SIZE
            sock.shutdown(socket.SHUT_WR)
        except OSError as e:
            logger.debug(f"Send failed after {total_bytes} bytes: {e}")
            raise ConnectError() from e

        elapsed = clock() - start

    logger.info(f"Sent {total_bytes} bytes in {elapsed:.3f}s")
    return TransferResult(total_bytes=total_bytes, elapsed_seconds=elapsed)
