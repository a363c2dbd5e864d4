"""Unit tests for the terminal front end."""

import pytest
from unittest.mock import Mock, AsyncMock
from qrdesk.console import Console
from qrdesk.controller import WorkflowController, MSG_GENERATE_FAILED


def make_console():
    """Console over a controller with mock adapters."""
    generator = Mock()
    generator.generate = AsyncMock(return_value="<svg>qr</svg>")
    downloads = Mock()
    downloads.resolve_download_directory = AsyncMock(return_value="/dl")
    downloads.open_download_directory = AsyncMock()
    sink = Mock()
    sink.save = AsyncMock()

    controller = WorkflowController(
        generator, downloads, sink, Mock(), clock=lambda: 2.0
    )
    output = []
    return Console(controller, write=output.append), controller, output


@pytest.mark.asyncio
async def test_plain_text_updates_url():
    """Non-command text edits the URL and shows advice."""
    console, controller, output = make_console()

    keep_going = await console.handle("example.com")

    assert keep_going is True
    assert controller.state.url == "example.com"
    assert output == ["⚠️ Consider using HTTPS for security"]


@pytest.mark.asyncio
async def test_generate_and_download_flow():
    """Generate then download renders ready and saved lines."""
    console, controller, output = make_console()

    await console.handle("https://example.com")
    await console.handle("/generate")
    assert "QR code ready for https://example.com" in output

    await console.handle("/download")
    assert output[-1] == "✅ Download complete! File saved to: /dl/qrcode-2000.svg"


@pytest.mark.asyncio
async def test_generate_refused_without_url():
    """Generate with empty input prints a hint only."""
    console, controller, output = make_console()

    await console.handle("/generate")

    controller.generator.generate.assert_not_called()
    assert output[0] == "Enter a URL first."


@pytest.mark.asyncio
async def test_generate_failure_renders_error():
    """Generation error is shown with the error icon."""
    console, controller, output = make_console()
    controller.generator.generate.side_effect = RuntimeError("boom")

    await console.handle("https://example.com")
    await console.handle("/generate")

    assert f"❌ {MSG_GENERATE_FAILED}" in output
    assert not any("boom" in line for line in output)


@pytest.mark.asyncio
async def test_show_prints_markup():
    """/show prints the SVG."""
    console, controller, output = make_console()

    await console.handle("https://example.com")
    await console.handle("/show")
    assert "<svg>qr</svg>" not in output

    await console.handle("/generate")
    await console.handle("/show")
    assert "<svg>qr</svg>" in output


@pytest.mark.asyncio
async def test_clear_resets_and_renders_nothing():
    """/clear empties the session."""
    console, controller, output = make_console()
    await console.handle("https://example.com")
    await console.handle("/generate")
    output.clear()

    await console.handle("/clear")

    assert output == []
    assert controller.state.artifact is None


@pytest.mark.asyncio
async def test_unknown_command_and_quit():
    """Unknown commands are reported, /quit ends the session."""
    console, controller, output = make_console()

    assert await console.handle("/frobnicate") is True
    assert "Unknown command" in output[0]
    assert await console.handle("/quit") is False


@pytest.mark.asyncio
async def test_ready_line_names_generated_url():
    """Ready line shows the encoded URL, not the edited field."""
    console, controller, output = make_console()
    await console.handle("https://a.example")
    await console.handle("/generate")
    output.clear()

    await console.handle("https://b.example")

    assert "QR code ready for https://a.example" in output
    assert not any("b.example" in line and "ready" in line for line in output)
