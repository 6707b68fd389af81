import logging

from project_utils.conversions import prefix_lines, split_targets
from project_utils.credentials import resolve_password
from project_utils.ssh import RunSshCmd

logger = logging.getLogger(__name__)


def run_command(cmd, hosts, opts):
    """
    Run cmd on every host of the comma separated hosts list, one after the
    other, and print the captured output tagged with user@host.
    The first failing host aborts the whole run.

    :param cmd: shell command line
    :param hosts: comma separated host names
    :param opts: options with username, password and timeout
    """
    password = resolve_password(opts, 'SSH')
    for host in split_targets(hosts):
        prefix = '{user}@{host}: '.format(user=opts.username, host=host)
        print('{prefix}$ {cmd}'.format(prefix=prefix, cmd=cmd))
        rc, stdout, stderr = RunSshCmd(cmd, host, opts.username, password, timeout=opts.timeout, pty=True)
        logger.debug('%s finished with rc=%s', host, rc)
        if stdout != '':
            print(prefix_lines(stdout, prefix))
