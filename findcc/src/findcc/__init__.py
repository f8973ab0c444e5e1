"""Find fixed-length digit runs with a valid check digit in a byte stream."""
from .models import Algorithm, MatchRecord
from .scanner import Scanner, ScannerConfig, scan_stream, scan_text
from .version import __version__

__all__ = [
    "Algorithm",
    "MatchRecord",
    "Scanner",
    "ScannerConfig",
    "scan_stream",
    "scan_text",
    "__version__",
]
