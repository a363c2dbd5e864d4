"""QR code generator interface (adapter pattern)."""

from typing import Protocol


class IQRGenerator(Protocol):
    """Interface for QR code generation."""

    async def generate(self, url: str) -> str:
        """Render QR code for url, return SVG markup."""
        ...
