"""Command-line argument parser for Iperfer."""

import re
from typing import Optional

from pydantic import ValidationError

from cli.constants import (
    HOST_FLAG,
    INT32_MAX,
    INT32_MIN,
    PORT_FLAG,
    RECEIVER_FLAG,
    RECEIVER_TOKEN_COUNT,
    SENDER_FLAG,
    SENDER_TOKEN_COUNT,
    TIME_FLAG,
)
from cli.models import Mode, RunConfig
from iperfer.exceptions import ArgumentError, PortRangeError, TimeRangeError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_args(argv: list[str]) -> RunConfig:
    """Parse raw arguments (without the program name) into a RunConfig.

    Args:
        argv: Argument tokens, e.g. ['-s', '-p', '5000']

    Returns:
        Validated RunConfig for the sender or receiver role

    Raises:
        ArgumentError: If the token list has the wrong shape
        PortRangeError: If the port is outside 1024..65535
        TimeRangeError: If the sender duration is not positive
    """
    if not argv:
        raise ArgumentError()

    if argv[0] == SENDER_FLAG:
        return _parse_sender(argv)
    elif argv[0] == RECEIVER_FLAG:
        return _parse_receiver(argv)
    else:
        raise ArgumentError()


def _parse_sender(argv: list[str]) -> RunConfig:
    """Parse '-c -h HOST -p PORT -t SECONDS', pairs in any order."""
    if len(argv) != SENDER_TOKEN_COUNT:
        raise ArgumentError()

    host: Optional[str] = None
    port: Optional[int] = None
    duration: Optional[int] = None

    for flag, value in zip(argv[1::2], argv[2::2]):
        if flag == HOST_FLAG:
            host = value
        elif flag == PORT_FLAG:
            port = _parse_int(value)
        elif flag == TIME_FLAG:
            duration = _parse_int(value)
        else:
            raise ArgumentError()

    if host is None or port is None or duration is None:
        raise ArgumentError()

    return _build_config(mode=Mode.SENDER, host=host, port=port, duration_seconds=duration)


def _parse_receiver(argv: list[str]) -> RunConfig:
    """Parse '-s -p PORT'."""
    if len(argv) != RECEIVER_TOKEN_COUNT or argv[1] != PORT_FLAG:
        raise ArgumentError()

    return _build_config(mode=Mode.RECEIVER, port=_parse_int(argv[2]))


def _parse_int(token: str) -> int:
    """Parse a signed decimal that fits in 32 bits, else ArgumentError."""
    if not _INTEGER.fullmatch(token):
        raise ArgumentError()

    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        raise ArgumentError()
    return value


def _build_config(**fields) -> RunConfig:
    """Build RunConfig, mapping field validation failures to range errors.

    Port is checked before duration.
    """
    try:
        return RunConfig(**fields)
    except ValidationError as e:
        failed = {error["loc"][0] for error in e.errors() if error["loc"]}
        if "port" in failed:
            raise PortRangeError() from e
        if "duration_seconds" in failed:
            raise TimeRangeError() from e
        raise ArgumentError() from e
