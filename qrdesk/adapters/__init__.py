"""Adapter implementations for qrdesk."""

from .qr_code_adapter import QRCodeAdapter
from .downloads_adapter import DownloadsAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'DownloadsAdapter',
    'StdoutAdapter',
]
