"""
Device signature table for mobile detection.

Maps each device family to the User-Agent pattern that identifies it.
Order matters: detection stops at the first family that matches, so the
catch-all "generic" family must stay last.
"""

import re
from types import MappingProxyType

# Request environment keys
HTTP_ACCEPT = 'HTTP_ACCEPT'
HTTP_USER_AGENT = 'HTTP_USER_AGENT'
HTTP_X_WAP_PROFILE = 'HTTP_X_WAP_PROFILE'
HTTP_PROFILE = 'HTTP_PROFILE'

# Accept header content types that only WAP browsers send
WAP_CONTENT_TYPES = (
    'text/vnd.wap.wml',
    'application/vnd.wap.xhtml+xml',
)

DEVICE_PATTERNS = MappingProxyType({
    'android': r'android',
    'blackberry': r'blackberry',
    'iphone': r'(iphone|safari mobi|ipod)',
    'ipad': r'(ipad)',
    'opera': r'(opera mini|mini 9.5)',
    'palm': r'(pre/|palm os|palm|webos|hiptop|treo|avantgo|plucker|xiino|blazer|elaine)',
    'windows': r'(iris|3g_t|windows ce|opera mobi|windows ce; smartphone;|windows ce; iemobile)',
    'generic': (
        r'(compal|wireless| mobi|ahong|xda_|foma|samsu|htc/|htc_touch|ktouch|m4u/|kddi'
        r'|phone|lg |sonyericsson|samsung|nokia|sony cmd|motorola|up.browser|up.link|mmp'
        r'|symbian|smartphone|midp|wap|vodafone|o2|pocket|kindle|mobile|psp)'
    ),
})


def compile_patterns(patterns):
    """
    Compile a family -> pattern mapping for case-insensitive searching.

    Strings are compiled with re.IGNORECASE, compiled patterns are kept as
    given. Any other value is kept too and simply never matches.

    Args:
        patterns: Mapping of device family name to pattern

    Returns:
        MappingProxyType: Read-only mapping in the original insertion order
    """
    compiled = {}
    for family, pattern in patterns.items():
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        compiled[family] = pattern
    return MappingProxyType(compiled)


COMPILED_DEVICE_PATTERNS = compile_patterns(DEVICE_PATTERNS)


def parse_device_list(value):
    """
    Normalise a device family list from configuration

    Accepts a comma separated string ("ipad, palm") or any iterable of names.
    Returns a tuple of lowercase names with blanks dropped.
    """
    if not value:
        return ()
    if isinstance(value, str):
        value = value.split(',')
    return tuple(name.strip().lower() for name in value if name and name.strip())
