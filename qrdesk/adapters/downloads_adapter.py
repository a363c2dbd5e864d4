"""Local downloads folder adapter."""

import asyncio
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

from ..interfaces import (
    IDownloadProvider,
    IArtifactSink,
    PathResolutionError,
    OpenError,
)


class DownloadsAdapter:
    """Adapter for the user's download folder on the local machine."""

    def __init__(self, download_dir: str = ""):
        self.download_dir = download_dir

    def _directory(self) -> Path:
        """Configured folder, else ~/Downloads, else cwd."""
        if self.download_dir:
            return Path(self.download_dir).expanduser()

        try:
            return Path.home() / "Downloads"
        except (RuntimeError, KeyError):
            # No resolvable home directory
            return Path.cwd()

    async def resolve_download_directory(self) -> str:
        """Return download directory path."""
        try:
            return str(self._directory())
        except OSError as e:
            print(f"ERROR: downloads path failed: {e}", file=sys.stderr)
            raise PathResolutionError(str(e)) from e

    def _open(self, path: Path) -> Optional[subprocess.Popen]:
        """Open path with the platform file manager."""
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # type: ignore[attr-defined]
            return None
        if sys.platform == "darwin":
            return subprocess.Popen(["open", str(path)])
        return subprocess.Popen(["xdg-open", str(path)])

    async def open_download_directory(self) -> None:
        """Open download directory in the file manager."""
        try:
            path = self._directory()
            if not path.is_dir():
                raise FileNotFoundError(f"no such folder: {path}")
            proc = self._open(path)
        except OSError as e:
            print(f"ERROR: open downloads failed: {e}", file=sys.stderr)
            raise OpenError(str(e)) from e

        if proc is None:
            return

        # Reap launcher so no zombie is left behind
        returncode = await asyncio.to_thread(proc.wait)
        if returncode != 0:
            print(f"ERROR: opener exited with {returncode}", file=sys.stderr)
            raise OpenError(f"opener exited with {returncode}")

    def _write(self, filename: str, content: str) -> str:
        path = self._directory()
        path.mkdir(parents=True, exist_ok=True)
        target = path / filename
        target.write_text(content, encoding="utf-8")
        return str(target)

    async def save(self, filename: str, content: str) -> str:
        """Write artifact into download directory."""
        if not filename:
            print("ERROR: filename empty", file=sys.stderr)
            raise PathResolutionError("filename required")

        try:
            return await asyncio.to_thread(self._write, filename, content)
        except OSError as e:
            print(f"ERROR: save failed: {e}", file=sys.stderr)
            raise PathResolutionError(str(e)) from e
