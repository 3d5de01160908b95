import os
from dotenv import load_dotenv

from .signatures import parse_device_list

# Load environment variables
load_dotenv()


class Config:
    """Base configuration class"""
    # Device families that are matched but never reported as mobile
    MOBILE_IGNORE_DEVICES = parse_device_list(os.getenv('MOBILE_IGNORE_DEVICES'))

    # Treat every request as a generic mobile device (handy when styling mobile templates)
    MOBILE_FORCE = os.getenv('MOBILE_FORCE', 'False').lower() == 'true'

    # Appended to template names for mobile requests, e.g. dashboard_mobile.html
    MOBILE_TEMPLATE_SUFFIX = os.getenv('MOBILE_TEMPLATE_SUFFIX', '_mobile')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Flask settings
    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    TESTING = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    # Never force the mobile view in production
    MOBILE_FORCE = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    MOBILE_IGNORE_DEVICES = ()
    MOBILE_FORCE = False
    MOBILE_TEMPLATE_SUFFIX = '_mobile'
    LOG_LEVEL = 'DEBUG'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Pick a configuration class by name, falling back to FLASK_ENV"""
    config_name = config_name or os.getenv('FLASK_ENV', 'default')
    return config[config_name]
