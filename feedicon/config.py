'''
Configuration settings, may be overridden by instance/config.toml
  or FEEDICON_ prefixed env. vars, e.g. FEEDICON_FETCH_TIMEOUT=20
'''

from . import __version__


class Config:
    USER_AGENT = 'Feedicon/%d.%d.%d%s' % __version__
    FETCH_TIMEOUT = 10  # Seconds
    FETCH_VIA_PROXY = False
    # Used only when fetching via proxy, e.g. http://proxy.example.com:3128
    HTTP_PROXY_URL = None
    ALLOW_SELF_SIGNED_CERTIFICATES = False
    LOG_LEVEL = 'INFO'


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    HTTP_PROXY_URL = 'http://proxy.example.com:3128'  # Override
