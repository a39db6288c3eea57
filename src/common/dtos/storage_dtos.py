"""Data Transfer Objects for persistence outcomes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageResult:
    """Outcome of a best-effort write; callers log failures instead of raising them."""

    ok: bool
    key: str
    error: Exception | None = None

    @classmethod
    def success(cls, key: str) -> "StorageResult":
        return cls(ok=True, key=key)

    @classmethod
    def failure(cls, key: str, error: Exception) -> "StorageResult":
        return cls(ok=False, key=key, error=error)
