"""Desktop window for running the LPT GPU scheduler interactively."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from lptsched.report import lower_bound
from lptsched.scheduler import (
    NUM_GPUS,
    TASK_NAMES,
    Continue,
    Simulation,
    simulate,
)

if TYPE_CHECKING:
    import tkinter as tk

MIN_DURATION = 50
MAX_DURATION = 1000
DURATION_STEP = 10

_GPU_TITLES = ("🟦 GPU 1", "🟩 GPU 2", "🟥 GPU 3")
_SUMMARY_TITLE = "📊 Summary"
_DONE_INDENT = " " * 11

_BACKGROUND = "#1e1e1e"
_PANEL = "#2b2b2b"
_FOREGROUND = "white"
_FONT = ("TkDefaultFont", 14)
_LABEL_FONT = ("TkDefaultFont", 14, "bold")
_MONO_FONT = ("TkFixedFont", 12)


def _gpu_title(index: int) -> str:
    return _GPU_TITLES[index] if index < len(_GPU_TITLES) else f"GPU {index + 1}"


def clamp_duration(value: int | float | str) -> int:
    """Round a duration to whole ms and keep it within the allowed range."""
    number = round(float(value))
    return max(MIN_DURATION, min(MAX_DURATION, number))


def format_gpu_logs(simulation: Simulation) -> list[str]:
    """Return the log text of each GPU, one string per GPU."""
    logs: list[list[str]] = [[] for _ in range(simulation.gpu_count)]
    for tick in simulation.ticks:
        for event in tick.events:
            lines = logs[event.gpu]
            if isinstance(event, Continue):
                lines.append(
                    f"Time {tick.time:3d}ms: Continuing [{event.name}] "
                    f"(Until {event.busy_until}ms)\n"
                )
                continue
            lines.append(
                f"Time {tick.time:3d}ms: Run [{event.name}] for {event.chunk}ms "
                f"(Remaining: {event.remaining}ms)\n"
            )
            if event.completed:
                lines.append(f"{_DONE_INDENT}✅ [{event.name}] done!\n")
    return ["".join(lines) for lines in logs]


def format_summary(simulation: Simulation) -> str:
    """Return the summary text shown below the GPU logs."""
    bound = lower_bound(simulation.durations, simulation.gpu_count)
    return (
        "🚀 Simulation Start\n\n"
        f"\n🎉 All tasks completed at {simulation.completion_time()}ms\n"
        f"📏 Theoretical min time: {bound:.2f}ms\n"
    )


class SchedulerApp:
    """Window with one duration input per module and a log per GPU."""

    def __init__(self, master: tk.Misc | None = None, gpu_count: int = NUM_GPUS):
        import tkinter as tk

        self._tk = tk
        self.gpu_count = gpu_count
        self.root = master if master is not None else tk.Tk()
        if isinstance(self.root, (tk.Tk, tk.Toplevel)):
            self.root.title("GPU Scheduler")
            self.root.geometry("1200x800")
        self.root.configure(background=_BACKGROUND)

        main = tk.Frame(self.root, background=_BACKGROUND)
        main.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        grid = tk.Frame(main, background=_BACKGROUND)
        grid.pack(anchor=tk.CENTER, pady=(0, 10))
        self.spinboxes: list[tk.Spinbox] = []
        for row, name in enumerate(TASK_NAMES):
            tk.Label(
                grid,
                text=name,
                font=_LABEL_FONT,
                foreground=_FOREGROUND,
                background=_BACKGROUND,
            ).grid(row=row, column=0, sticky=tk.W, padx=(0, 30), pady=5)
            spinbox = tk.Spinbox(
                grid,
                from_=MIN_DURATION,
                to=MAX_DURATION,
                increment=DURATION_STEP,
                width=8,
                font=_FONT,
            )
            spinbox.grid(row=row, column=1, sticky=tk.E, pady=5)
            self.spinboxes.append(spinbox)

        tk.Button(
            main, text="▶ Run Simulation", font=_FONT, command=self.run_simulation
        ).pack(anchor=tk.CENTER, pady=10)

        gpu_row = tk.Frame(main, background=_BACKGROUND)
        gpu_row.pack(fill=tk.BOTH, expand=True)
        self.gpu_texts: list[tk.Text] = []
        for index in range(gpu_count):
            frame, text = self._log_box(gpu_row, _gpu_title(index))
            frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=6)
            self.gpu_texts.append(text)

        summary_frame, self.summary_text = self._log_box(main, _SUMMARY_TITLE)
        summary_frame.pack(fill=tk.BOTH, expand=True, pady=(10, 0))

    def _log_box(self, parent: tk.Misc, title: str) -> tuple[tk.Frame, tk.Text]:
        tk = self._tk
        frame = tk.Frame(parent, background=_PANEL, padx=8, pady=8)
        tk.Label(
            frame,
            text=title,
            font=_LABEL_FONT,
            foreground=_FOREGROUND,
            background=_PANEL,
        ).pack(anchor=tk.CENTER)
        holder = tk.Frame(frame, background=_PANEL)
        holder.pack(fill=tk.BOTH, expand=True)
        scrollbar = tk.Scrollbar(holder)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        text = tk.Text(
            holder,
            font=_MONO_FONT,
            wrap=tk.CHAR,
            state=tk.DISABLED,
            yscrollcommand=scrollbar.set,
        )
        text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.configure(command=text.yview)
        return frame, text

    def _set_text(self, widget: tk.Text, content: str) -> None:
        tk = self._tk
        widget.configure(state=tk.NORMAL)
        widget.delete("1.0", tk.END)
        widget.insert(tk.END, content)
        widget.configure(state=tk.DISABLED)

    def _durations(self) -> list[int]:
        durations = []
        for spinbox in self.spinboxes:
            try:
                value = clamp_duration(spinbox.get())
            except ValueError:
                value = MIN_DURATION
            spinbox.delete(0, self._tk.END)
            spinbox.insert(0, str(value))
            durations.append(value)
        return durations

    def run_simulation(self) -> Simulation:
        """Schedule the entered durations and show the logs and summary."""
        simulation = simulate(self._durations(), self.gpu_count)
        for widget, log in zip(self.gpu_texts, format_gpu_logs(simulation)):
            self._set_text(widget, log)
        self._set_text(self.summary_text, format_summary(simulation))
        self.root.update_idletasks()
        return simulation

    def mainloop(self) -> None:
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Open the scheduler window and run until it is closed."""
    del argv
    try:
        app = SchedulerApp()
    except Exception as error:  # no display or no Tk available
        print(f"lptsched-gui: cannot open window: {error}", file=sys.stderr)
        return 1
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())