"""Terminal front end bound to the workflow controller."""

from typing import Callable

from .controller import WorkflowController

SEVERITY_ICONS = {
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
}

HELP_TEXT = (
    "Type a URL to set it, then use:\n"
    "/generate - Generate QR code\n"
    "/download - Save QR code to downloads\n"
    "/open - Open downloads folder\n"
    "/show - Print QR code SVG\n"
    "/clear - Start over\n"
    "/quit - Exit"
)


class Console:
    """Line-based UI: text lines edit the URL, slash lines are commands."""

    def __init__(
        self,
        controller: WorkflowController,
        write: Callable[[str], None] = print,
    ):
        self.controller = controller
        self.write = write

        # Table-driven dispatch
        self.commands = {
            'generate': self._generate,
            'download': self._download,
            'open': self._open,
            'show': self._show,
            'clear': self._clear,
            'help': self._help,
        }

    async def _generate(self) -> None:
        if not self.controller.can_submit:
            self.write("Enter a URL first.")
            return
        await self.controller.submit()

    async def _download(self) -> None:
        if not self.controller.state.artifact:
            self.write("Nothing to download yet, use /generate.")
            return
        await self.controller.download()

    async def _open(self) -> None:
        await self.controller.open_download_location()

    async def _show(self) -> None:
        if self.controller.state.artifact:
            self.write(self.controller.state.artifact)

    async def _clear(self) -> None:
        self.controller.clear()

    async def _help(self) -> None:
        self.write(HELP_TEXT)

    def render(self) -> list[str]:
        """Lines describing current session state."""
        state = self.controller.state
        lines = []

        if state.verdict.message:
            icon = SEVERITY_ICONS[state.verdict.severity]
            lines.append(f"{icon} {state.verdict.message}")
        if state.error_message:
            lines.append(f"❌ {state.error_message}")
        if state.artifact:
            lines.append(f"QR code ready for {state.artifact_url}")
        if state.download_confirmed:
            lines.append(
                f"✅ Download complete! File saved to: {state.download_path}"
            )
        return lines

    async def handle(self, line: str) -> bool:
        """Process one input line. Returns False when session ends."""
        if line.startswith("/"):
            command = line[1:].strip().lower()
            if command == "quit":
                return False

            handler = self.commands.get(command)
            if handler is None:
                self.write(f"Unknown command: /{command}. Try /help.")
                return True
            await handler()
        else:
            self.controller.update_url(line)

        for rendered in self.render():
            self.write(rendered)
        return True
