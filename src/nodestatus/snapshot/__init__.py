"""Status snapshot assembly."""

from .assembler import ASSEMBLY_ERRORS, SnapshotAssembler
from .error_handler import ErrorHandler
from .error_records import MAX_SNAPSHOT_ERRORS, merge_error_records
from .errors import SnapshotAssemblyError
from .factory import SnapshotAssemblerDependencies, SnapshotAssemblerFactory
from .types import SnapshotMeta, StatusSnapshot, format_timestamp

__all__ = [
    "ASSEMBLY_ERRORS",
    "ErrorHandler",
    "MAX_SNAPSHOT_ERRORS",
    "SnapshotAssembler",
    "SnapshotAssemblerDependencies",
    "SnapshotAssemblerFactory",
    "SnapshotAssemblyError",
    "SnapshotMeta",
    "StatusSnapshot",
    "format_timestamp",
    "merge_error_records",
]
