"""QR code generator adapter."""

import asyncio
import sys

import qrcode
import qrcode.image.svg
from qrcode.constants import (
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
    ERROR_CORRECT_H,
)

from ..interfaces import IQRGenerator, GenerationError

ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


class QRCodeAdapter:
    """Adapter for QR code generation as SVG markup."""

    def __init__(
        self,
        error_correction: str = "H",
        box_size: int = 10,
        border: int = 4,
        dark_color: str = "#000000",
        light_color: str = "#ffffff",
    ):
        if error_correction not in ERROR_LEVELS:
            raise ValueError(f"unknown error correction: {error_correction}")

        self.error_correction = ERROR_LEVELS[error_correction]
        self.box_size = box_size
        self.border = border
        # qrcode reads colors from class attributes
        self.image_factory = type(
            "ColoredSvgPathImage",
            (qrcode.image.svg.SvgPathImage,),
            {
                "background": light_color,
                "QR_PATH_STYLE": {
                    **qrcode.image.svg.SvgPathImage.QR_PATH_STYLE,
                    "fill": dark_color,
                },
            },
        )

    def _render(self, data: str) -> str:
        """Render data to SVG string (blocking)."""
        qr = qrcode.QRCode(
            version=None,
            error_correction=self.error_correction,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(image_factory=self.image_factory)
        return img.to_string(encoding="unicode")

    async def generate(self, url: str) -> str:
        """Generate QR code SVG for url."""
        if not url:
            print("ERROR: QR data empty", file=sys.stderr)
            raise GenerationError("data required")

        try:
            return await asyncio.to_thread(self._render, url)
        except Exception as e:
            print(f"ERROR: QR render failed: {e}", file=sys.stderr)
            raise GenerationError(str(e)) from e
