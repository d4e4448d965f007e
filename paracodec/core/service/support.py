import logging
from typing import Any

from paracodec.core.errors import LifecycleError
from paracodec.core.models.state import ServiceState
from paracodec.core.ports.service import Service


def start_service(obj: Any) -> None:
    """Start `obj` if it has a lifecycle, ignore it otherwise."""
    if isinstance(obj, Service):
        obj.start()


def stop_service(obj: Any) -> None:
    """Stop `obj` if it has a lifecycle, ignore it otherwise."""
    if isinstance(obj, Service):
        obj.stop()


class ServiceSupport:
    """
    Base class implementing the service state machine.

    Subclasses put their own logic in `do_start()` and `do_stop()`:
    - `start()` is a no-op on a started service, and fails on a stopped
      or failed one
    - a failing `do_start()` moves the service to `failed` and the error
      propagates to the caller
    - `stop()` on a service that never started only marks it stopped
    """

    def __init__(self) -> None:
        self._state = ServiceState.created
        self._service_logger = logging.getLogger("core.service.support")

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def is_started(self) -> bool:
        return self._state == ServiceState.started

    @property
    def is_stopped(self) -> bool:
        return self._state == ServiceState.stopped

    def start(self) -> None:
        match self._state:
            case ServiceState.started:
                return
            case ServiceState.stopped | ServiceState.failed:
                raise LifecycleError(f"Cannot start {self} in state '{self._state}'")

        try:
            self.do_start()
        except Exception:
            self._state = ServiceState.failed
            raise

        self._state = ServiceState.started
        self._service_logger.debug(f"Started {self}")

    def stop(self) -> None:
        match self._state:
            case ServiceState.started:
                self.do_stop()
                self._state = ServiceState.stopped
                self._service_logger.debug(f"Stopped {self}")
            case ServiceState.created:
                self._state = ServiceState.stopped

    def do_start(self) -> None:
        pass

    def do_stop(self) -> None:
        pass
