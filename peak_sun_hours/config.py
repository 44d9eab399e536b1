"""
Peak sun hours report configuration
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(value):
    if value in (None, ''):
        return None
    return float(value)


class Config:
    """Base configuration"""
    # Flask settings
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
    PORT = int(os.getenv('PORT', 5000))
    TESTING = False
    SECRET_KEY = os.getenv('SECRET_KEY', 'peak-sun-hours-dev-key')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # PVGIS API settings
    PVGIS_BASE_URL = os.getenv('PVGIS_BASE_URL', 'https://re.jrc.ec.europa.eu')
    PVGIS_CALC_PATH = '/api/v5_2/PVcalc'
    # None means the request runs until it completes or the transport fails
    PVGIS_TIMEOUT = _optional_float(os.getenv('PVGIS_TIMEOUT'))

    # Fixed calculation parameters
    PEAK_POWER = 1
    SYSTEM_LOSS = 14
    OUTPUT_FORMAT = 'json'

    # Form defaults
    DEFAULT_LOCATION = (1.3733, 32.2903)  # Kampala, Uganda
    DEFAULT_TILT = 10
    DEFAULT_AZIMUTH = 0

    # Overlapping calculations: keep the last to resolve unless enabled
    DISCARD_STALE_RESULTS = os.getenv('DISCARD_STALE_RESULTS', 'false').lower() == 'true'

    # Export settings
    REPORT_FILENAME = 'solar-report.pdf'
    DATA_FILENAME = 'solar-report'


class DevelopmentConfig(Config):
    """Development settings"""
    FLASK_DEBUG = True
    FLASK_ENV = 'development'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production settings"""
    FLASK_DEBUG = False
    FLASK_ENV = 'production'


class TestingConfig(Config):
    """Test settings"""
    TESTING = True
    FLASK_ENV = 'testing'
    SECRET_KEY = 'testing'
    PVGIS_BASE_URL = 'http://pvgis.test'
    DISCARD_STALE_RESULTS = False


# Select configuration by environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Return the configuration class for the current environment"""
    env = name or os.getenv('FLASK_ENV', 'default')
    return config.get(env, config['default'])
