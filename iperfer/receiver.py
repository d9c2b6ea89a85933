"""Receiver role: accept one connection and drain it until the peer closes."""

import socket
import time
from typing import Callable, Optional

from common.constants import CHUNK_SIZE, LISTEN_BACKLOG
from common.logging_config import get_logger
from iperfer.exceptions import ServerError
from iperfer.results import TransferResult

logger = get_logger(__name__)


def _listen(port: int) -> socket.socket:
    """Bind a listening socket on all interfaces, dual-stack where available."""
    try:
        if socket.has_dualstack_ipv6():
            return socket.create_server(
                ("", port),
                family=socket.AF_INET6,
                backlog=LISTEN_BACKLOG,
                dualstack_ipv6=True,
            )
        return socket.create_server(("", port), backlog=LISTEN_BACKLOG)
    except OSError as e:
        logger.debug(f"Bind to port {port} failed: {e}")
        raise ServerError() from e


def run_receiver(
    port: int,
    clock: Callable[[], float] = time.monotonic,
    ready: Optional[Callable[[int], None]] = None
) -> TransferResult:
    """
    Listen on port, accept exactly one sender and count bytes until EOF.

    Blocks indefinitely waiting for the sender. Timing starts right before
    the first read and stops right after the read that reports end of stream.

    Args:
        port: Port to listen on
        clock: Monotonic time source in seconds
        ready: Called with the bound port once the socket is listening

    Returns:
        TransferResult with bytes read and elapsed read time

    Raises:
        ServerError: If binding, accepting or reading fails
    """
    with _listen(port) as server:
        bound_port = server.getsockname()[1]
        logger.info(f"Listening on port {bound_port}")
        if ready is not None:
            ready(bound_port)

        try:
            conn, addr = server.accept()
        except OSError as e:
            logger.debug(f"Accept failed: {e}")
            raise ServerError() from e

        with conn:
            logger.info(f"Accepted connection from {addr[0]}:{addr[1]}")
            buffer = bytearray(CHUNK_SIZE)
            total_bytes = 0
            start = clock()
            try:
                while True:
                    received = conn.recv_into(buffer)
                    if received == 0:
                        break
                    total_bytes += received
            except OSError as e:
                logger.debug(f"Read failed after {total_bytes} bytes: {e}")
                raise ServerError() from e
            end = clock()

    logger.info(f"Received {total_bytes} bytes in {end - start:.3f}s")
    return TransferResult(total_bytes=total_bytes, elapsed_seconds=end - start)
