import os
import uuid

MACHINE_ID_FILES = ('/etc/machine-id', '/var/lib/dbus/machine-id')


def get_host_id(paths=MACHINE_ID_FILES):
    # dash-less, vDC accepts it as the device hash on login
    for path in paths:
        if os.path.isfile(path):
            with open(path) as f:
                host_id = f.read().strip()
            if host_id:
                return host_id.replace('-', '')
    return uuid.UUID(int=uuid.getnode()).hex
