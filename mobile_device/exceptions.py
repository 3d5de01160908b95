"""
Exceptions raised by the mobile device detector.
"""


class MobileDeviceError(Exception):
    """Base class for mobile device detection errors."""


class UnknownDeviceError(MobileDeviceError, LookupError):
    """
    A device family was queried that the pattern table does not know.

    The attempted family name is kept on ``device`` so callers can report it.
    """

    message = 'This mobile-device class is unknown'

    def __init__(self, device: str):
        self.device = device
        super().__init__(f"{self.message}: {device!r}")
