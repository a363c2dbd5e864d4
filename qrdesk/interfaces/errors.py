"""Error taxonomy shared by adapters and the controller."""


class QRDeskError(Exception):
    """Base class for qrdesk errors."""


class ValidationError(QRDeskError):
    """URL rejected before any external call."""


class GenerationError(QRDeskError):
    """QR code rendering failed."""


class PathResolutionError(QRDeskError):
    """Download directory could not be resolved or written."""


class OpenError(QRDeskError):
    """Download directory could not be opened."""
