# lptsched

A small simulator of Longest-Processing-Time (LPT) scheduling. Five
autonomous-car software modules share a pool of GPUs (three by default):

- Perception (Sensor Fusion)
- Localization (Position Estimation)
- Object Detection
- Path Planning
- Control (Actuator Commands)

Time advances in fixed ticks (50 ms by default). At each tick every idle
GPU picks the unfinished module with the most work left that no other GPU
is running (ties go to the module listed first) and runs it for one tick
or for whatever remains, whichever is shorter.

When every module is finished the simulator reports the completion time
(the number of ticks simulated times the tick length) next to the
theoretical lower bound: the total work divided by the number of GPUs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

No third-party libraries are needed. The window front end uses `tkinter`
from the standard library.

## Command line

```
lptsched
```

With no arguments the default durations (70, 200, 190, 250 and 300 ms)
are scheduled and a tick-by-tick report is printed: which GPU runs which
module, for how long and with how much left, which GPUs are still busy
and until when, when each module completes, and the final summary.

```
lptsched 120 80 300 40 60
lptsched --gpus 2 --tick 25 120 80 300
lptsched --interactive
```

- Positional arguments are durations in ms, non-negative whole numbers.
  Any number may be given; modules beyond the fifth are named `Task N`.
- `-i`, `--interactive` asks for the five module durations one by one,
  asking again after any entry that is not a non-negative integer. It
  cannot be combined with positional durations. If input ends early the
  command prints an error and exits with status 1.
- `--gpus N` sets the number of GPUs (default 3, at least 1).
- `--tick MS` sets the tick length (default 50, at least 1).

Invalid values are reported as usage errors.

## Graphical front end

```
lptsched-gui
```

opens a window with one spin box per module (50 to 1000 ms in steps of
10; typed values are rounded and kept in that range), a "Run Simulation"
button, a log pane per GPU and a summary pane. If no window can be
opened, for instance without a display, the command prints the reason and
exits with status 1.

## Library use

```python
from lptsched.scheduler import simulate, lower_bound
from lptsched.report import render_report

durations = [70, 200, 190, 250, 300]
simulation = simulate(durations, 3, 50)

print(simulation.completion_time())   # ticks simulated * tick length, in ms
print(lower_bound(durations, 3))      # total work / GPU count
print(render_report(simulation))      # the same text the command prints
```

In `lptsched.scheduler`:

- `simulate(durations, gpu_count=3, tick_ms=50)` returns a `Simulation`
  and raises `ValueError` for a negative duration or a GPU count or tick
  length below 1.
- `Simulation` holds the `Task` records (`id`, `name`, `total`,
  `remaining`), `gpu_count`, `tick_ms` and the `Tick` records, and offers
  `durations`, `total_work` and `completion_time()`.
- Each `Tick` has a `time` and the `events` of the GPUs at that moment:
  `Run` (a new chunk, with `chunk`, `remaining` and `completed`) and
  `Continue` (still busy, with `busy_until`). `Tick.runs` gives only the
  `Run` events.
- `select_task(tasks, busy)` makes the LPT choice on its own: the task
  with the most remaining work whose id is not in `busy`, or `None`.
- `lower_bound(durations, gpu_count=3)` returns the total work divided by
  the GPU count.

`lptsched.report.format_report` yields the report line by line and
`render_report` joins it into one string. `lptsched.gui` offers
`format_gpu_logs`, `format_summary` and `clamp_duration`, the text and
input handling behind the window, alongside `SchedulerApp`.

## What it does not do

The simulation is fixed-tick and in-memory: it does not schedule real
work on GPUs, read durations from files, or save results anywhere other
than standard output and the window's panes.