import pytest
from flask import Flask

from mobile_device.config import config
from mobile_device.utils.device_detector import init_app


@pytest.fixture
def app():
    app = Flask(__name__)
    app.config.from_object(config['testing'])
    init_app(app)
    return app
