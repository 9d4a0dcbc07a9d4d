from lptsched.report import format_report, render_report
from lptsched.scheduler import Continue, Simulation, Task, Tick, simulate

DEFAULTS = [70, 200, 190, 250, 300]


def test_small_report_exact():
    lines = list(format_report(simulate([100], gpu_count=1)))
    assert lines == [
        "Autonomous Robot Car Packing Scheduler (LPT)",
        "GPUs: 1, Modules: 1",
        "Modules:",
        "  Task 0: Perception (Sensor Fusion) (100 ms)",
        "",
        "Time: 0 ms",
        "  GPU 0 runs [Perception (Sensor Fusion)] for 50 ms (remaining: 50 ms)",
        "",
        "Time: 50 ms",
        "  GPU 0 runs [Perception (Sensor Fusion)] for 50 ms (remaining: 0 ms)",
        "    [Perception (Sensor Fusion)] completed!",
        "",
        "All modules completed at 100 ms",
        "Theoretical lower bound: 100.00 ms",
    ]


def test_default_report_summary():
    lines = list(format_report(simulate(DEFAULTS)))
    assert lines[1] == "GPUs: 3, Modules: 5"
    assert lines[-2] == "All modules completed at 350 ms"
    assert lines[-1] == "Theoretical lower bound: 336.67 ms"


def test_module_listing():
    lines = list(format_report(simulate(DEFAULTS)))
    assert lines[3] == "  Task 0: Perception (Sensor Fusion) (70 ms)"
    assert lines[7] == "  Task 4: Control (Actuator Commands) (300 ms)"


def test_one_completion_line_per_task():
    lines = list(format_report(simulate(DEFAULTS)))
    assert sum(line.endswith("completed!") for line in lines) == len(DEFAULTS)


def test_one_time_header_per_tick():
    sim = simulate(DEFAULTS)
    lines = list(format_report(sim))
    assert sum(line.startswith("Time: ") for line in lines) == len(sim.ticks)


def test_continue_line():
    sim = Simulation(
        tasks=(Task(0, "A", 100, 0),),
        gpu_count=1,
        tick_ms=50,
        ticks=(Tick(0, (Continue(gpu=0, task=0, name="A", busy_until=80),)),),
    )
    assert "  GPU 0 continues [A] (busy until 80 ms)" in list(format_report(sim))


def test_render_joins_lines():
    sim = simulate(DEFAULTS)
    text = render_report(sim)
    assert text.endswith("\n")
    assert text.splitlines() == list(format_report(sim))