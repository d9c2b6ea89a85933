"""Transfer measurement result and its report line."""

from dataclasses import dataclass

from common.constants import (
    BITS_PER_BYTE,
    BITS_PER_MEGABIT,
    BYTES_PER_KB,
    CHUNK_SIZE,
    RESULT_LINE_FORMAT,
)

CHUNK = bytes(CHUNK_SIZE)


@dataclass(frozen=True)
class TransferResult:
    """
    Bytes moved by one role and the wall time it took.
    """
    total_bytes: int
    elapsed_seconds: float

    @property
    def kilobytes(self) -> int:
        """Whole kilobytes (1 KB = 1000 bytes), truncated."""
        return self.total_bytes // BYTES_PER_KB

    @property
    def rate_mbps(self) -> float:
        """Throughput in megabits per second over the measured elapsed time."""
        if self.elapsed_seconds <= 0:
            return 0.0
        return (self.total_bytes * BITS_PER_BYTE) / (self.elapsed_seconds * BITS_PER_MEGABIT)

    def format_line(self, label: str) -> str:
        """
        Render the report line, e.g. ``sent=2000 KB rate=8.000 Mbps``.

        Args:
            label: Leading word ('sent' or 'received')

        Returns:
            Report line without trailing newline
        """
        return RESULT_LINE_FORMAT.format(label=label, kilobytes=self.kilobytes, rate=self.rate_mbps)
