import logging
import paramiko
from project_utils.conversions import TextToString

logger = logging.getLogger(__name__)


class SSHSession(paramiko.SSHClient):
   """
   sub class of paramiko.SSHClient. Opens a password authenticated session
   to a single host on construction and runs commands over fresh channels.
   Use as a context manager so the transport is closed after the host is done.
   """

   def __init__(self, server, username, password, timeout=5):
      super(SSHSession, self).__init__()
      self.server = server
      self.username = username
      self.password = password
      self.timeout = timeout
      self.establish_session()

   def establish_session(self):
      self.set_missing_host_key_policy(paramiko.AutoAddPolicy())
      logger.debug('connecting to %s@%s (timeout=%ss)', self.username, self.server, self.timeout)
      # single attempt, a failing host aborts the caller
      self.connect(self.server, username=self.username, password=self.password,
                   timeout=self.timeout, banner_timeout=self.timeout, auth_timeout=self.timeout,
                   look_for_keys=False, allow_agent=False)

   def exec_cmd(self, cmd, pty=True):
      """
      execute command, wait for it to finish and return rc, stdout, stderr.
      With a pseudo-terminal stderr is merged into stdout by the remote side.

      :param cmd: the command to execute on remote host
      :param pty: request a pseudo-terminal for the command
      :return: int rc, str stdout, str stderr of the executed command
      """
      stdin, stdout, stderr = self.exec_command(cmd, get_pty=pty)
      stdin.close()
      stdoutlines = stdout.read()
      stderrlines = stderr.read()
      rc = stdout.channel.recv_exit_status()
      logger.debug('%s, %s, rc=%s', self.server, cmd, rc)
      return rc, TextToString(stdoutlines), TextToString(stderrlines)


def RunSshCmd(cmd, host, user, pw, timeout=5, pty=True):

   with SSHSession(host, user, pw, timeout=timeout) as ssh:
      rc, stdout, stderr = ssh.exec_cmd(cmd, pty=pty)
      return rc, stdout, stderr
