import logging

from vdc.connection import check_response, get_headers, get_power_url, get_servers_url

logger = logging.getLogger(__name__)


def get_servers(session, context):
    """
    :return: dict mapping server name to vDC server id
    """
    response = session.request("GET", get_servers_url(context.api), headers=get_headers(context))
    check_response(response)
    servers = response.json()['servers']
    name2id = {}
    for server_id, server in servers.items():
        name2id[server['name']] = server_id
    logger.debug('found %s servers', len(name2id))
    return name2id


def set_power(session, context, server_id, on):
    response = session.request("PATCH", get_power_url(context.api, server_id),
                               headers=get_headers(context), json={"power": on})
    check_response(response)
