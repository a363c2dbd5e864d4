"""Artifact sink interface (adapter pattern)."""

from typing import Protocol


class IArtifactSink(Protocol):
    """Interface for saving generated artifacts."""

    async def save(self, filename: str, content: str) -> str:
        """Save artifact under filename, return written path."""
        ...
