import logging
import os

import requests

from vdc.constants import PROXY_ENV
from vdc.errors import VdcHttpError

logger = logging.getLogger(__name__)


def get_proxy():
    return os.environ.get(PROXY_ENV)


def get_session(proxy=None):
    """
    cookie-aware session shared by every vDC call of one invocation,
    the login cookie set by /api/login is required by /Panel/.
    """
    session = requests.Session()
    if proxy:
        logger.debug('using proxy %s', proxy)
        session.proxies.update({'http': proxy, 'https': proxy})
        # https_proxy/no_proxy from the environment would override session.proxies
        session.trust_env = False
    return session


def get_login_url(location):
    return "{location}/api/login".format(location=location)


def get_panel_url(location):
    return "{location}/Panel/".format(location=location)


def get_servers_url(api_url):
    return "{api_url}/objects/servers".format(api_url=api_url)


def get_power_url(api_url, server_id):
    return "{servers_url}/{server_id}/power".format(servers_url=get_servers_url(api_url), server_id=server_id)


def get_headers(context=None):
    headers = {'accept': "application/json"}
    if context is not None:
        headers['X-Auth-UserId'] = context.user
        headers['X-Auth-Token'] = context.token
    return headers


def check_response(response):
    logger.debug('%s %s - %s', response.request.method, response.url, response.status_code)
    if not response.ok:
        raise VdcHttpError(response.request.method, response.url, response.status_code, response.text)
    return response
