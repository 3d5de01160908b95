"""
Request metadata needed for device detection.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from .signatures import HTTP_ACCEPT, HTTP_USER_AGENT, HTTP_X_WAP_PROFILE, HTTP_PROFILE


@dataclass(frozen=True)
class RequestContext:
    """Snapshot of the request headers the detector looks at."""
    http_accept: str = ''
    http_user_agent: str = ''
    has_wap_profile_header: bool = False

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'RequestContext':
        """
        Build a context from a CGI/WSGI style environment mapping.

        Missing (or None) Accept and User-Agent values become empty strings.
        The WAP profile headers only count by their presence; a None value
        is treated as absent.

        Args:
            environ: Mapping of environment keys to values, may be None

        Returns:
            RequestContext: Immutable snapshot of the relevant keys
        """
        if not environ:
            return cls()

        return cls(
            http_accept=environ.get(HTTP_ACCEPT) or '',
            http_user_agent=environ.get(HTTP_USER_AGENT) or '',
            has_wap_profile_header=(
                environ.get(HTTP_X_WAP_PROFILE) is not None
                or environ.get(HTTP_PROFILE) is not None
            ),
        )
