"""Configuration management.

Raw environment values; numbers are parsed and checked by main.
"""

import os


# Download Configuration
DOWNLOAD_DIR = os.getenv("QRDESK_DOWNLOAD_DIR", "")
CONFIRM_SECONDS = os.getenv("QRDESK_CONFIRM_SECONDS", "3")

# QR Rendering Configuration
ERROR_CORRECTION = os.getenv("QRDESK_ERROR_CORRECTION", "H").upper()
BOX_SIZE = os.getenv("QRDESK_BOX_SIZE", "10")
BORDER = os.getenv("QRDESK_BORDER", "4")
DARK_COLOR = os.getenv("QRDESK_DARK_COLOR", "#000000")
LIGHT_COLOR = os.getenv("QRDESK_LIGHT_COLOR", "#ffffff")

# Logging Configuration
LOG_LEVEL = os.getenv("QRDESK_LOG_LEVEL", "warn").lower()
