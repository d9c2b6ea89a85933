"""Shared pytest fixtures for all tests."""

import socket
import threading

import pytest

from iperfer.receiver import run_receiver


class FakeClock:
    """
    Deterministic clock that advances by a fixed step on every call.
    """

    def __init__(self, step: float, start: float = 100.0):
        self.step = step
        self.now = start
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


class ReceiverThread:
    """
    Runs run_receiver on an ephemeral port in a background thread.
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.port = None
        self.result = None
        self.error = None
        self._listening = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def _on_ready(self, port: int) -> None:
        self.port = port
        self._listening.set()

    def _run(self) -> None:
        try:
            self.result = run_receiver(0, ready=self._on_ready, **self.kwargs)
        except Exception as e:
            self.error = e
            self._listening.set()

    def start(self) -> 'ReceiverThread':
        self._thread.start()
        assert self._listening.wait(timeout=5), "receiver never started listening"
        return self

    def join(self, timeout: float = 10.0) -> None:
        self._thread.join(timeout=timeout)
        assert not self._thread.is_alive(), "receiver did not finish"


@pytest.fixture
def fake_clock():
    """
    Factory for FakeClock instances.

    Returns:
        Callable building a FakeClock with the given step
    """
    return FakeClock


@pytest.fixture
def receiver_factory():
    """
    Start receivers on ephemeral loopback ports.

    Returns:
        Callable taking run_receiver keyword arguments and returning a
        started ReceiverThread; call join() to collect its result
    """
    started = []

    def start(**kwargs) -> ReceiverThread:
        thread = ReceiverThread(**kwargs).start()
        started.append(thread)
        return thread

    yield start

    for thread in started:
        if thread._thread.is_alive():
            # Unblock accept() so the daemon thread can exit.
            try:
                socket.create_connection(("127.0.0.1", thread.port), timeout=1).close()
            except OSError:
                pass
            thread.join()


@pytest.fixture
def receiver(receiver_factory):
    """
    Start a receiver on an ephemeral loopback port.

    Returns:
        Started ReceiverThread; call join() to collect its result
    """
    return receiver_factory()


@pytest.fixture
def unused_port():
    """
    Find a port nothing is listening on.

    Returns:
        Port number that refuses connections
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]
