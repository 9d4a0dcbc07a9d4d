"""Plain-text report of a scheduling run."""

from __future__ import annotations

from collections.abc import Iterator

from lptsched.scheduler import Continue, Simulation, lower_bound


def format_report(simulation: Simulation) -> Iterator[str]:
    """Yield the lines of the report, without line endings."""
    yield "Autonomous Robot Car Packing Scheduler (LPT)"
    yield f"GPUs: {simulation.gpu_count}, Modules: {len(simulation.tasks)}"
    yield "Modules:"
    for task in simulation.tasks:
        yield f"  Task {task.id}: {task.name} ({task.total} ms)"

    for tick in simulation.ticks:
        yield ""
        yield f"Time: {tick.time} ms"
        for event in tick.events:
            if isinstance(event, Continue):
                yield (
                    f"  GPU {event.gpu} continues [{event.name}] "
                    f"(busy until {event.busy_until} ms)"
                )
                continue
            yield (
                f"  GPU {event.gpu} runs [{event.name}] for {event.chunk} ms "
                f"(remaining: {event.remaining} ms)"
            )
            if event.completed:
                yield f"    [{event.name}] completed!"

    bound = lower_bound(simulation.durations, simulation.gpu_count)
    yield ""
    yield f"All modules completed at {simulation.completion_time()} ms"
    yield f"Theoretical lower bound: {bound:.2f} ms"


def render_report(simulation: Simulation) -> str:
    """Return the whole report as one newline-terminated string."""
    return "\n".join(format_report(simulation)) + "\n"