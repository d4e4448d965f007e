from typing import Protocol, runtime_checkable


@runtime_checkable
class Service(Protocol):
    """
    Anything with a start/stop lifecycle.

    `start()` acquires the resources the service needs (pools, caches,
    compiled schemas); `stop()` releases them. Once stopped, a service is
    not used again.
    """

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...
