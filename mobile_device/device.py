"""
Mobile device detection from request metadata.

A DeviceDetector is built for one request. It checks the WAP profile
headers, then the Accept header, then the User-Agent against the device
pattern table, and remembers which device family matched.

Example:
    detector = DeviceDetector({'HTTP_USER_AGENT': 'Mozilla/5.0 (iPhone; CPU iPhone OS)'})
    detector.is_mobile()         # True
    detector.get_device_class()  # 'iphone'
    detector.query('isIphone')   # True
"""

import logging
from typing import Iterable, Mapping, Optional, Union

from .context import RequestContext
from .exceptions import UnknownDeviceError
from .signatures import (
    COMPILED_DEVICE_PATTERNS,
    WAP_CONTENT_TYPES,
    compile_patterns,
    parse_device_list,
)

logger = logging.getLogger(__name__)

Environ = Union[Mapping[str, str], RequestContext, None]


class DeviceDetector:
    """Detects mobile devices and their device family for a single request"""

    def __init__(
        self,
        environ: Environ = None,
        *,
        patterns: Optional[Mapping[str, object]] = None,
        ignore: Iterable[str] = (),
    ):
        """
        Init the detector and run detection right away.

        Args:
            environ: Request environment mapping or RequestContext. None is an
                empty request; the process environment is never consulted.
            patterns: Optional family -> pattern table replacing the built-in one
            ignore: Device families that must not count as mobile
        """
        if patterns is None:
            self._patterns = COMPILED_DEVICE_PATTERNS
        else:
            self._patterns = compile_patterns(patterns)

        self._ignore = set(ignore)
        self._context = RequestContext()
        self._mobile = False
        self._device_class = None

        self.detect(environ)

    @classmethod
    def from_config(cls, environ: Environ, settings: Mapping[str, object]) -> 'DeviceDetector':
        """
        Build a detector from configuration settings.

        Args:
            environ: Request environment mapping or RequestContext
            settings: Mapping with MOBILE_IGNORE_DEVICES and MOBILE_FORCE keys,
                e.g. a Flask app.config

        Returns:
            DeviceDetector: Detector with detection already run
        """
        detector = cls(environ, ignore=parse_device_list(settings.get('MOBILE_IGNORE_DEVICES')))
        if settings.get('MOBILE_FORCE'):
            logger.debug("MOBILE_FORCE is set, forcing generic mobile state")
            detector.force_state()
        return detector

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(mobile={self._mobile!r}, "
            f"device_class={self._device_class!r})"
        )

    @property
    def families(self):
        """Known device families in detection order."""
        return tuple(self._patterns)

    @property
    def ignored(self):
        return frozenset(self._ignore)

    @property
    def context(self) -> RequestContext:
        return self._context

    def detect(self, environ: Environ = None) -> bool:
        """
        Detect a device.

        The previous result is not reset: the WAP shortcuts and a failed
        User-Agent match leave the device class as it was.

        Args:
            environ: Request environment mapping or RequestContext

        Returns:
            bool: True if a mobile device was detected and not ignored
        """
        if isinstance(environ, RequestContext):
            self._context = environ
        else:
            self._context = RequestContext.from_environ(environ)

        if self._context.has_wap_profile_header:
            logger.debug("WAP profile header present")
            self._mobile = True
        elif any(content_type in self._context.http_accept for content_type in WAP_CONTENT_TYPES):
            logger.debug("WAP content type accepted: %s", self._context.http_accept)
            self._mobile = True
        else:
            self._mobile = False
            for family in self._patterns:
                if self._match(family):
                    self._mobile = True
                    break

        if self._mobile and self._device_class in self._ignore:
            logger.debug("Device class %s is ignored", self._device_class)
            self._mobile = False

        logger.debug("Detection result: %r", self)
        return self.is_mobile()

    def match_family(self, family: str) -> bool:
        """
        Check the captured User-Agent against one device family.

        Args:
            family: Device family name, e.g. 'android'

        Returns:
            bool: True if the User-Agent matches; the family then becomes
                the device class

        Raises:
            UnknownDeviceError: If the family is not in the pattern table
        """
        if family not in self._patterns:
            raise UnknownDeviceError(family)
        return self._match(family)

    def query(self, name: str) -> bool:
        """
        Per-family check by name: 'isAndroid', 'is_android' and 'android'
        all check the android family.
        """
        family = name.lower()
        if family.startswith('is'):
            family = family[2:]
            if family.startswith('_'):
                family = family[1:]
        return self.match_family(family)

    def is_android(self) -> bool:
        return self.match_family('android')

    def is_blackberry(self) -> bool:
        return self.match_family('blackberry')

    def is_iphone(self) -> bool:
        return self.match_family('iphone')

    def is_ipad(self) -> bool:
        return self.match_family('ipad')

    def is_opera(self) -> bool:
        return self.match_family('opera')

    def is_palm(self) -> bool:
        return self.match_family('palm')

    def is_windows(self) -> bool:
        return self.match_family('windows')

    def is_generic(self) -> bool:
        return self.match_family('generic')

    def ignore(self, family: str) -> 'DeviceDetector':
        """Never count the given device family as mobile."""
        self._ignore.add(family)
        return self

    def is_mobile(self) -> bool:
        """Returns True if any type of mobile device was detected"""
        return self._mobile

    def get_device_class(self) -> Optional[str]:
        """Get the matched device family, None if nothing matched yet"""
        return self._device_class

    def force_state(self) -> 'DeviceDetector':
        """Force a generic mobile device"""
        self._mobile = True
        self._device_class = 'generic'
        return self

    def reset_state(self) -> 'DeviceDetector':
        """Reset the detection result, keeping the context and ignore list"""
        self._mobile = False
        self._device_class = None
        return self

    def _match(self, family: str) -> bool:
        pattern = self._patterns[family]
        # Only regex patterns can match
        if not hasattr(pattern, 'search'):
            return False

        if pattern.search(self._context.http_user_agent):
            self._device_class = family
            return True
        return False
