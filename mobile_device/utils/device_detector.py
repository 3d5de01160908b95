"""
Device detection utility for Flask apps
Detects mobile vs desktop devices for the current request

This is the only place the ambient request environment is read: the WSGI
environ of the current Flask request is snapshotted once per request and
the detector is cached on flask.g.
"""

import logging
from typing import Optional

from flask import current_app, g, request

from mobile_device.context import RequestContext
from mobile_device.device import DeviceDetector


def get_device_detector() -> DeviceDetector:
    """
    Get the device detector for the current request
    Built from request.environ and the app config on first use
    """
    detector = g.get('device_detector')
    if detector is None:
        context = RequestContext.from_environ(request.environ)
        detector = DeviceDetector.from_config(context, current_app.config)
        current_app.logger.debug(
            "Device detection for %s: mobile=%s class=%s",
            request.path, detector.is_mobile(), detector.get_device_class()
        )
        g.device_detector = detector
    return detector


def is_mobile_device() -> bool:
    """
    Detect if the current request is from a mobile device
    Returns True for mobile devices, False for desktop
    """
    return get_device_detector().is_mobile()


def get_device_class() -> Optional[str]:
    """
    Get the matched device family ('android', 'iphone', ...)
    Returns None if no family matched
    """
    return get_device_detector().get_device_class()


def get_device_type() -> str:
    """
    Get device type as string
    Returns 'mobile' or 'desktop'
    """
    return 'mobile' if is_mobile_device() else 'desktop'


def get_template_suffix() -> str:
    """
    Get template suffix for device-specific templates
    Returns the configured suffix ('_mobile') for mobile devices, '' for desktop
    """
    if not is_mobile_device():
        return ''
    return current_app.config.get('MOBILE_TEMPLATE_SUFFIX', '_mobile')


def init_app(app):
    """Set up logging and make the device helpers available in templates"""
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.getLogger('mobile_device').setLevel(level)
    app.logger.setLevel(level)

    app.jinja_env.globals.update(
        is_mobile_device=is_mobile_device,
        get_device_class=get_device_class,
        get_device_type=get_device_type,
        get_template_suffix=get_template_suffix
    )
    return app
