"""Scanner orchestration logic."""
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List

import structlog

from ..exceptions import ConfigurationError, ScanInvariantError, StreamReadError
from ..models import Algorithm, MatchRecord
from ..utils.checks import checksum_valid
from ..utils.text import to_bytes
from .state import ScanState

logger = structlog.get_logger("findcc.scanner")

DEFAULT_WINDOW_LENGTH = 16
DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class ScannerConfig:
    window_length: int = DEFAULT_WINDOW_LENGTH
    algorithm: Algorithm = Algorithm.LUHN
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.window_length < 1:
            raise ConfigurationError(f"Window length must be at least 1, got {self.window_length}")
        if self.chunk_size < 1:
            raise ConfigurationError(f"Chunk size must be at least 1, got {self.chunk_size}")
        if not isinstance(self.algorithm, Algorithm):
            try:
                algorithm = Algorithm(self.algorithm)
            except ValueError as exc:
                raise ConfigurationError(f"Unknown checksum algorithm: {self.algorithm!r}") from exc
            object.__setattr__(self, "algorithm", algorithm)


class Scanner:
    """Find check-digit-valid runs of ASCII digits in a byte stream."""

    def __init__(self, config: ScannerConfig | None = None) -> None:
        self.config = config or ScannerConfig()

    def scan(self, stream: BinaryIO) -> Iterator[MatchRecord]:
        """Lazily yield matches in stream order.

        The stream is consumed once. Bytes are read in chunks but every byte
        is handled in order, so a long digit run is re-validated at each
        position once the window is full. A partial window left at
        end-of-stream is dropped without validation.

        Progress is logged only once structlog has been configured, for
        example by ``configure_logging``; structlog's defaults would
        otherwise print to standard output.
        """

        config = self.config
        length = config.window_length
        state = ScanState()
        matches = 0
        verbose = structlog.is_configured()
        if verbose:
            logger.info("scan started", window_length=length, algorithm=config.algorithm.value)
        while True:
            chunk = self._read(stream)
            if not chunk:
                break
            for byte in chunk:
                if not state.push(byte, length):
                    continue
                if not checksum_valid(state.window, config.algorithm):
                    continue
                record = MatchRecord(
                    offset=state.window_start,
                    line=state.newlines_read,
                    number=state.window.decode("ascii"),
                )
                matches += 1
                if verbose:
                    logger.debug("match found", offset=record.offset, line=record.line)
                yield record
        if verbose:
            logger.info("scan finished", bytes_read=state.bytes_read, lines=state.newlines_read, matches=matches)

    def _read(self, stream: BinaryIO) -> bytes:
        try:
            chunk = stream.read(self.config.chunk_size)
        except OSError as exc:
            raise StreamReadError(f"Read error: {exc}") from exc
        if chunk is None:
            raise ScanInvariantError("Didn't read anything, but no error detected. This shouldn't happen.")
        if not isinstance(chunk, (bytes, bytearray)):
            raise ScanInvariantError(f"Input stream returned {type(chunk).__name__}, expected bytes")
        return chunk


def scan_stream(
    stream: BinaryIO,
    *,
    scanner: Scanner | None = None,
    config: ScannerConfig | None = None,
) -> Iterator[MatchRecord]:
    runner = scanner or Scanner(config=config)
    if config is not None:
        runner.config = config
    return runner.scan(stream)


def scan_text(
    data: str | bytes,
    *,
    scanner: Scanner | None = None,
    config: ScannerConfig | None = None,
) -> List[MatchRecord]:
    return list(scan_stream(io.BytesIO(to_bytes(data)), scanner=scanner, config=config))


__all__ = ["Scanner", "ScannerConfig", "scan_stream", "scan_text"]
