"""Workflow controller - owns session state and sequences external calls."""

import asyncio
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .interfaces import (
    IQRGenerator,
    IDownloadProvider,
    IArtifactSink,
    ILogSink,
    ValidationError,
)
from .validation import ValidationVerdict, validate_url

MSG_ENTER_URL = "Please enter a valid URL"
MSG_GENERATE_FAILED = "Failed to generate QR code, please retry"
MSG_DOWNLOAD_FAILED = "Download failed, please retry"
MSG_OPEN_FAILED = "Cannot open download folder"

FILE_PREFIX = "qrcode-"
FILE_EXTENSION = ".svg"


@dataclass
class SessionState:
    """UI session state, one instance per running session."""
    url: str = ""
    artifact: Optional[str] = None
    artifact_url: str = ""
    is_loading: bool = False
    error_message: str = ""
    download_confirmed: bool = False
    download_path: str = ""
    verdict: ValidationVerdict = field(default_factory=ValidationVerdict)


class WorkflowController:
    """Generate/download/clear workflow for one session."""

    def __init__(
        self,
        generator: IQRGenerator,
        downloads: IDownloadProvider,
        sink: IArtifactSink,
        logger: ILogSink,
        confirm_seconds: float = 3.0,
        clock: Callable[[], float] = time.time,
    ):
        self.generator = generator
        self.downloads = downloads
        self.sink = sink
        self.logger = logger
        self.confirm_seconds = confirm_seconds
        self.clock = clock
        self.state = SessionState()
        self._confirm_timer: Optional[asyncio.TimerHandle] = None
        self._generation = 0

    @property
    def can_submit(self) -> bool:
        """Submit control is enabled only when idle with input."""
        return not self.state.is_loading and bool(self.state.url.strip())

    def update_url(self, new_url: str) -> None:
        """Store new input and re-run validation."""
        self.state.url = new_url
        self.state.error_message = ""
        self.state.verdict = validate_url(new_url)

    def _check_submittable(self) -> str:
        """Return trimmed url or raise ValidationError."""
        url = self.state.url.strip()
        if not url:
            raise ValidationError(MSG_ENTER_URL)

        verdict = self.state.verdict
        if not verdict.acceptable:
            raise ValidationError(verdict.message or MSG_ENTER_URL)
        return url

    async def submit(self) -> None:
        """Generate QR code for the current url."""
        # At most one generation in flight
        if self.state.is_loading:
            self.logger.log("warn", "Submit ignored: generation in progress")
            return

        try:
            url = self._check_submittable()
        except ValidationError as e:
            self.state.error_message = str(e)
            return

        self.state.is_loading = True
        self.state.error_message = ""
        self._generation += 1
        generation = self._generation
        self.logger.log("info", f"Generating QR code for {url}")

        try:
            artifact = await self.generator.generate(url)
        except Exception as e:
            self.logger.log("error", f"Error generating QR code: {e}")
            if generation == self._generation:
                self.state.error_message = MSG_GENERATE_FAILED
                self.state.is_loading = False
            return

        # Session was cleared while rendering
        if generation != self._generation:
            self.logger.log("info", f"Discarded QR code for {url}")
            return

        self.state.artifact = artifact
        self.state.artifact_url = url
        self.state.is_loading = False
        self.logger.log("info", f"QR code generated for {url}")

    def _make_filename(self) -> str:
        """Timestamped file name, milliseconds since epoch."""
        return f"{FILE_PREFIX}{int(self.clock() * 1000)}{FILE_EXTENSION}"

    def _cancel_confirm_timer(self) -> None:
        if self._confirm_timer is not None:
            self._confirm_timer.cancel()
            self._confirm_timer = None

    def _expire_confirmation(self) -> None:
        self._confirm_timer = None
        self.state.download_confirmed = False

    async def download(self) -> None:
        """Save current artifact and confirm its location."""
        if not self.state.artifact:
            return

        try:
            filename = self._make_filename()
            await self.sink.save(filename, self.state.artifact)

            directory = await self.downloads.resolve_download_directory()
            self.state.download_path = os.path.join(directory, filename)
            self.state.download_confirmed = True
            self.logger.log(
                "info", f"QR code saved to {self.state.download_path}"
            )

            self._cancel_confirm_timer()
            loop = asyncio.get_running_loop()
            self._confirm_timer = loop.call_later(
                self.confirm_seconds, self._expire_confirmation
            )
        except Exception as e:
            self.logger.log("error", f"Error downloading QR code: {e}")
            self._cancel_confirm_timer()
            self.state.download_confirmed = False
            self.state.error_message = MSG_DOWNLOAD_FAILED

    async def open_download_location(self) -> None:
        """Open download folder in the file manager."""
        try:
            await self.downloads.open_download_directory()
            self.logger.log("info", "Opened downloads folder")
        except Exception as e:
            self.logger.log("error", f"Error opening downloads folder: {e}")
            self.state.error_message = MSG_OPEN_FAILED

    def clear(self) -> None:
        """Reset session to its initial values."""
        self._cancel_confirm_timer()
        # Any generation still running is abandoned
        self._generation += 1
        self.state.is_loading = False
        self.state.artifact = None
        self.state.artifact_url = ""
        self.state.url = ""
        self.state.error_message = ""
        self.state.download_confirmed = False
        self.state.download_path = ""
        self.state.verdict = ValidationVerdict()
        self.logger.log("info", "Session cleared")
