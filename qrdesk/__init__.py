"""qrdesk - URL to QR code desktop utility."""

__version__ = "0.1.0"
