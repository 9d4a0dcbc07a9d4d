"""Longest-processing-time scheduling of modules onto a pool of GPUs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

TASK_NAMES: tuple[str, ...] = (
    "Perception (Sensor Fusion)",
    "Localization (Position Estimation)",
    "Object Detection",
    "Path Planning",
    "Control (Actuator Commands)",
)
NUM_GPUS = 3
TICK_MS = 50


@dataclass
class Task:
    """A module to be run, with its total and remaining work in ms."""

    id: int
    name: str
    total: int
    remaining: int


@dataclass(frozen=True)
class Run:
    """A GPU starting a chunk of work on a task."""

    gpu: int
    task: int
    name: str
    chunk: int
    remaining: int

    @property
    def completed(self) -> bool:
        return self.remaining == 0


@dataclass(frozen=True)
class Continue:
    """A GPU still busy with a chunk started earlier."""

    gpu: int
    task: int
    name: str
    busy_until: int


@dataclass(frozen=True)
class Tick:
    """Everything that happened on the GPUs at one point in time."""

    time: int
    events: tuple[Run | Continue, ...]

    @property
    def runs(self) -> tuple[Run, ...]:
        return tuple(event for event in self.events if isinstance(event, Run))


@dataclass(frozen=True)
class Simulation:
    """The outcome of a scheduling run."""

    tasks: tuple[Task, ...]
    gpu_count: int
    tick_ms: int
    ticks: tuple[Tick, ...] = field(default_factory=tuple)

    @property
    def durations(self) -> tuple[int, ...]:
        return tuple(task.total for task in self.tasks)

    @property
    def total_work(self) -> int:
        return sum(self.durations)

    def completion_time(self) -> int:
        """Time in ms at which the simulation loop ended."""
        return len(self.ticks) * self.tick_ms


@dataclass
class _GpuState:
    busy_until: int = 0
    current: int | None = None


def _task_name(index: int) -> str:
    return TASK_NAMES[index] if index < len(TASK_NAMES) else f"Task {index}"


def select_task(tasks: Iterable[Task], busy: Iterable[int]) -> Task | None:
    """Return the non-busy task with the most remaining work, or None.

    Ties go to the task that comes first.
    """
    busy_ids = set(busy)
    best: Task | None = None
    for task in tasks:
        if task.id in busy_ids:
            continue
        if task.remaining > (best.remaining if best is not None else 0):
            best = task
    return best


def simulate(
    durations: Sequence[int],
    gpu_count: int = NUM_GPUS,
    tick_ms: int = TICK_MS,
) -> Simulation:
    """Schedule the given module durations onto GPUs in chunks of tick_ms."""
    if gpu_count < 1:
        raise ValueError("gpu_count must be at least 1")
    if tick_ms < 1:
        raise ValueError("tick_ms must be at least 1")
    for duration in durations:
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")

    tasks = [
        Task(id=index, name=_task_name(index), total=duration, remaining=duration)
        for index, duration in enumerate(durations)
    ]
    gpus = [_GpuState() for _ in range(gpu_count)]
    done = sum(1 for task in tasks if task.remaining == 0)
    time = 0
    ticks: list[Tick] = []

    while done < len(tasks):
        busy = {
            gpu.current
            for gpu in gpus
            if gpu.busy_until > time and gpu.current is not None
        }
        events: list[Run | Continue] = []
        for index, gpu in enumerate(gpus):
            if gpu.busy_until <= time:
                task = select_task(tasks, busy)
                if task is None:
                    gpu.current = None
                    continue
                chunk = min(task.remaining, tick_ms)
                task.remaining -= chunk
                gpu.busy_until = time + chunk
                gpu.current = task.id
                busy.add(task.id)
                events.append(Run(index, task.id, task.name, chunk, task.remaining))
                if task.remaining == 0:
                    done += 1
            elif gpu.current is not None:
                current = tasks[gpu.current]
                events.append(Continue(index, current.id, current.name, gpu.busy_until))
        ticks.append(Tick(time, tuple(events)))
        time += tick_ms

    return Simulation(tuple(tasks), gpu_count, tick_ms, tuple(ticks))


def lower_bound(durations: Iterable[int], gpu_count: int = NUM_GPUS) -> float:
    """Total work divided evenly over the GPUs."""
    if gpu_count < 1:
        raise ValueError("gpu_count must be at least 1")
    return sum(durations) / gpu_count