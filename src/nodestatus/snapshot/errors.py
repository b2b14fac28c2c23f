"""Error types for snapshot assembly."""

from __future__ import annotations


class SnapshotAssemblyError(RuntimeError):
    """Raised when a snapshot cannot be assembled at all."""

    @classmethod
    def unexpected(cls, cause: BaseException) -> "SnapshotAssemblyError":
        return cls(f"Snapshot assembly failed: {cause}")


__all__ = ["SnapshotAssemblyError"]
