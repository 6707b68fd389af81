class VdcError(Exception):
    pass


class InvalidVmError(VdcError):
    def __init__(self, vm):
        super(InvalidVmError, self).__init__('invalid VM name "{}"'.format(vm))
        self.vm = vm


class ApiContextError(VdcError):
    """Panel page did not carry the embedded API user/token/url."""

    def __init__(self, missing):
        super(ApiContextError, self).__init__(
            'vDC panel page lacks API credentials: missing {}'.format(', '.join(missing)))
        self.missing = missing


class VdcHttpError(VdcError):
    def __init__(self, method, url, status_code, text):
        super(VdcHttpError, self).__init__(
            '{method} {url} failed - {status_code} {text}'.format(
                method=method, url=url, status_code=status_code, text=text[:200]))
        self.method = method
        self.url = url
        self.status_code = status_code
        self.text = text
