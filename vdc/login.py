import logging
import re
from collections import namedtuple

from vdc.connection import check_response, get_headers, get_login_url, get_panel_url
from vdc.errors import ApiContextError

logger = logging.getLogger(__name__)

ApiContext = namedtuple('ApiContext', ['user', 'token', 'api'])

# the panel embeds the API credentials in an inline script, e.g. "token": 'abc'
API_CONTEXT_PATTERNS = {
    'user': re.compile(r"\"user\":\s*'(.+?)'"),
    'token': re.compile(r"\"token\":\s*'(.+?)'"),
    'api': re.compile(r"\"api\":\s*'(.+?)'"),
}


def authenticate(session, location, username, password, device_hash):
    data = {
        "email": username,
        "password": password,
        "hash": device_hash,
        "force_login": True,
        "lang": "en"
    }
    response = session.request("POST", get_login_url(location), headers=get_headers(), json=data)
    check_response(response)
    logger.debug('logged in to %s as %s', location, username)


def extract_api_context(html):
    """
    Scrape API user id, token and base url out of the panel html.

    :param html: body of the /Panel/ page
    :return: ApiContext
    :raises ApiContextError: when any of the values is not present
    """
    values = {}
    missing = []
    for key, pattern in API_CONTEXT_PATTERNS.items():
        match = pattern.search(html)
        if match is None:
            missing.append(key)
        else:
            values[key] = match.group(1)
    if missing:
        raise ApiContextError(missing)
    return ApiContext(**values)


def discover_api_context(session, location):
    response = session.request("GET", get_panel_url(location))
    check_response(response)
    context = extract_api_context(response.text)
    logger.debug('vDC api at %s for user %s', context.api, context.user)
    return context
