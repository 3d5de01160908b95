"""
Mobile device detection

Classifies a request as mobile or not, and which device family it comes
from, using only the request headers (CGI/WSGI environ keys).
"""

from .context import RequestContext
from .device import DeviceDetector
from .exceptions import MobileDeviceError, UnknownDeviceError
from .signatures import DEVICE_PATTERNS, WAP_CONTENT_TYPES

__version__ = "0.1.0"
__all__ = [
    'DeviceDetector',
    'RequestContext',
    'MobileDeviceError',
    'UnknownDeviceError',
    'DEVICE_PATTERNS',
    'WAP_CONTENT_TYPES',
]
