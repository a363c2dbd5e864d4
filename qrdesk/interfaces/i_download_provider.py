"""Download location provider interface (adapter pattern)."""

from typing import Protocol


class IDownloadProvider(Protocol):
    """Interface for locating and opening the download folder."""

    async def resolve_download_directory(self) -> str:
        """Return platform download directory."""
        ...

    async def open_download_directory(self) -> None:
        """Open download directory in the file manager."""
        ...
