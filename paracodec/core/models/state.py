from enum import StrEnum


class ServiceState(StrEnum):
    """
    Lifecycle state of a service.

        created --start()--> started --stop()--> stopped
        created --start() raises--> failed

    There is no way back from `stopped` or `failed`.
    """
    created = "created"
    started = "started"
    stopped = "stopped"
    failed = "failed"
