import os

DEFAULT_LOCATION = os.environ.get('VDC_LOCATION', 'https://vdc.msg.systems')

# vDC API rejects power togglings that follow each other too closely,
# kept as strings so argparse validates environment overrides too
DEFAULT_POWER_DELAY = os.environ.get('VDC_POWER_DELAY', '10')

DEFAULT_SSH_USERNAME = 'root'
DEFAULT_SSH_TIMEOUT = os.environ.get('VDC_SSH_TIMEOUT', '5')

PROXY_ENV = 'http_proxy'

LOG_FORMAT = '%(asctime)s [%(filename)s:%(lineno)s] %(levelname)s %(message)s'
