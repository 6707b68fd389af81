import logging
import time

from project_utils.conversions import split_targets
from project_utils.credentials import resolve_password
from project_utils.hostid import get_host_id
from vdc.connection import get_proxy, get_session
from vdc.errors import InvalidVmError
from vdc.login import authenticate, discover_api_context
from vdc.servers import get_servers, set_power

logger = logging.getLogger(__name__)


def toggle_power(level, vms, opts):
    """
    Switch power of the comma separated vms on (level=True) or off via vDC.
    VMs are processed in order, pausing opts.delay seconds between two of them.
    A failure stops the loop, VMs toggled before stay toggled.

    :param level: True for power on, False for power off
    :param vms: comma separated VM names
    :param opts: options with location, username, password and delay
    """
    password = resolve_password(opts, 'vDC')
    with get_session(get_proxy()) as session:
        authenticate(session, opts.location, opts.username, password, get_host_id())
        context = discover_api_context(session, opts.location)
        name2id = get_servers(session, context)

        vm_list = split_targets(vms)
        for index, vm in enumerate(vm_list):
            server_id = name2id.get(vm)
            if not isinstance(server_id, str):
                raise InvalidVmError(vm)
            print('{vm}: switching power {state}'.format(vm=vm, state='on' if level else 'off'))
            set_power(session, context, server_id, level)
            if index + 1 < len(vm_list):
                logger.debug('waiting %s seconds before next VM', opts.delay)
                time.sleep(opts.delay)
