"""A three-stage pipeline: decode, compress and send, each on its own work queue."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_MAX_RUNS = 10000


@dataclass(frozen=True)
class DataPacket:
    value: int


@dataclass(frozen=True)
class DecodedData:
    value: int


@dataclass(frozen=True)
class CompressedData:
    value: int


class WorkQueue:
    """A FIFO of tasks run by whoever calls :meth:`run`."""

    def __init__(self) -> None:
        self._tasks: deque[Callable[[], Any]] = deque()
        self._cond = threading.Condition()
        self._stopped = False

    def push_task(self, task: Callable[[], Any]) -> None:
        """Queue ``task``; ignored once the queue has been stopped."""
        with self._cond:
            if self._stopped:
                return
            self._tasks.append(task)
            self._cond.notify()

    def run(self) -> None:
        """Run tasks until the queue is stopped and empty."""
        while True:
            with self._cond:
                while not self._tasks:
                    if self._stopped:
                        return
                    self._cond.wait()
                task = self._tasks.popleft()
            task()

    def stop(self) -> None:
        """Refuse new tasks; :meth:`run` returns once the queue drains."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()


class DataSource:
    """Produces packets numbered 1, 2, ... up to ``max_runs``."""

    def __init__(self, max_runs: int = DEFAULT_MAX_RUNS) -> None:
        self.max_runs = max_runs
        self._count = 0
        self._lock = threading.Lock()

    def get_data(self) -> DataPacket:
        with self._lock:
            self._count += 1
            return DataPacket(self._count)

    def is_stopped(self) -> bool:
        with self._lock:
            return self._count == self.max_runs

    def _take(self) -> DataPacket | None:
        with self._lock:
            if self._count >= self.max_runs:
                return None
            self._count += 1
            return DataPacket(self._count)


class DataSink:
    """Counts the packets it receives, checking their order unless told not to."""

    def __init__(self, check_order: bool = True) -> None:
        self.check_order = check_order
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def send_data(self, data: CompressedData) -> None:
        with self._lock:
            self._count += 1
            if self.check_order and data.value != self._count:
                raise ValueError(
                    f"packet {data.value} arrived in position {self._count}"
                )


def decode_data(packet: DataPacket) -> DecodedData:
    return DecodedData(packet.value)


def compress_data(decoded: DecodedData) -> CompressedData:
    return CompressedData(decoded.value)


def run_conveyor(max_runs: int = DEFAULT_MAX_RUNS) -> int:
    """Push ``max_runs`` packets through the three queues; return how many were sent."""
    source = DataSource(max_runs)
    sink = DataSink()
    decoding, compressing, sending = WorkQueue(), WorkQueue(), WorkQueue()

    def do_compress(decoded: DecodedData) -> None:
        compressed = compress_data(decoded)
        sending.push_task(lambda: sink.send_data(compressed))

    def do_decode(packet: DataPacket) -> None:
        decoded = decode_data(packet)
        compressing.push_task(lambda: do_compress(decoded))

    stages = [decoding, compressing, sending]
    threads = [threading.Thread(target=queue.run) for queue in stages]
    for thread in threads:
        thread.start()

    while not source.is_stopped():
        packet = source.get_data()
        decoding.push_task(lambda p=packet: do_decode(p))

    for queue, thread in zip(stages, threads):
        queue.stop()
        thread.join()
    return sink.count


def run_in_threads(max_runs: int = DEFAULT_MAX_RUNS) -> int:
    """Process packets on two threads, each doing every stage; return how many were sent."""
    source = DataSource(max_runs)
    sink = DataSink(check_order=False)

    def process_data() -> None:
        while (packet := source._take()) is not None:
            sink.send_data(compress_data(decode_data(packet)))

    worker = threading.Thread(target=process_data)
    worker.start()
    process_data()
    worker.join()
    return sink.count