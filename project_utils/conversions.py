def TextToString(text=''):
   '''
   Convert arbitrary command output to a string variable.
   Accepts: NoneType, string and bytes
   Returns: string, trailing whitespace stripped
   '''
   if text is None:
      return ''
   if isinstance(text, bytes):
      text = text.decode('utf-8', errors='replace')
   return str(text).rstrip()


def prefix_lines(text, prefix):
   """
   prepend prefix to every line of text, pty output uses CRLF line endings
   so both line separators are handled.

   :param text: multi-line text
   :param prefix: tag put in front of each line, e.g. 'root@host1: '
   :return: str
   """
   lines = text.replace('\r\n', '\n').split('\n')
   return '\n'.join('{}{}'.format(prefix, line) for line in lines)


def split_targets(targets):
   # order matters, targets are processed as listed
   return targets.split(',')
