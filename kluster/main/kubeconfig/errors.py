"""Error taxonomy for kubeconfig discovery and loading."""
from __future__ import annotations
from typing import Optional


class KubeconfigError(RuntimeError):
    pass


class DirectoryUnavailable(KubeconfigError):
    """Scan target is missing or cannot be listed. Callers treat it as 'nothing found'."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Directory unavailable: {path} ({cause})")


class SourceReadError(KubeconfigError):
    """A kubeconfig file exists but could not be read or parsed."""

    def __init__(self, path: str, cause: BaseException | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read kubeconfig '{path}': {cause}")


__all__ = ['KubeconfigError', 'DirectoryUnavailable', 'SourceReadError']
