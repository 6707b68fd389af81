import getpass


def resolve_password(opts, label):
    """
    Return opts.password, prompting for it on the terminal when it was not
    given on the command line. The answer is kept on opts so the prompt
    happens at most once per invocation.

    :param opts: parsed command line options, needs username and password
    :param label: what the password is for, e.g. 'vDC' or 'SSH'
    :return: password string
    """
    if isinstance(opts.password, str):
        return opts.password
    opts.password = getpass.getpass("{username} {label} password: ".format(username=opts.username, label=label))
    return opts.password
