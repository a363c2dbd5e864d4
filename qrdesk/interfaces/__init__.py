"""Interface definitions for qrdesk adapters."""

from .i_qr_generator import IQRGenerator
from .i_download_provider import IDownloadProvider
from .i_artifact_sink import IArtifactSink
from .i_log_sink import ILogSink
from .errors import (
    QRDeskError,
    ValidationError,
    GenerationError,
    PathResolutionError,
    OpenError,
)

__all__ = [
    'IQRGenerator',
    'IDownloadProvider',
    'IArtifactSink',
    'ILogSink',
    'QRDeskError',
    'ValidationError',
    'GenerationError',
    'PathResolutionError',
    'OpenError',
]
