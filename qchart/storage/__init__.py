"""Storage helpers for chart output"""

from qchart.storage.file_writer import write_bytes

__all__ = ["write_bytes"]
