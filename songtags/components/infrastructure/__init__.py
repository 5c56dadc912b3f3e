"""
Infrastructure package.
"""

from .safe_write_comp import SafeWriteResult, write_data_to_file

__all__ = ["SafeWriteResult", "write_data_to_file"]
