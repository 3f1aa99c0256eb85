"""
ChunkCipher Output Module
==========================

Console display and report generation for pipeline runs.
"""

from chunkcipher.output.console import CipherConsoleOutput
from chunkcipher.output.report import RunReportWriter

__all__ = [
    "CipherConsoleOutput",
    "RunReportWriter",
]
