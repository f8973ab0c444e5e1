"""Scanner package exports."""
from .engine import Scanner, ScannerConfig, scan_stream, scan_text
from .state import ScanState

__all__ = ["Scanner", "ScannerConfig", "ScanState", "scan_stream", "scan_text"]
