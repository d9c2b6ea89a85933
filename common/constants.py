"""Project-wide constants (chunk size, port bounds, unit conversions)."""

CHUNK_SIZE: int = 1000  # bytes per write/read

MIN_PORT: int = 1024
MAX_PORT: int = 65535

BYTES_PER_KB: int = 1000
BITS_PER_BYTE: int = 8
BITS_PER_MEGABIT: int = 1_000_000

LISTEN_BACKLOG: int = 1

RESULT_LINE_FORMAT = "{label}={kilobytes} KB rate={rate:.3f} Mbps"
