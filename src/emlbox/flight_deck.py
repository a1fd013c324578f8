"""Conversion Deck - a TUI for running and watching mbox conversions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    ProgressBar,
    Rule,
    Static,
)

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.converter import MboxConverter
from emlbox.errors import ConversionError
from emlbox.models import ConversionProgress


@dataclass
class ConversionStats:
    """Statistics tracked during a conversion run."""

    files_total: int = 0
    files_processed: int = 0
    chunks_written: int = 0
    total_bytes: int = 0
    current_file: str = ""
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        delta = end - self.start_time
        minutes, seconds = divmod(int(delta.total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def rate(self) -> str:
        if not self.start_time or self.files_processed == 0:
            return "-- files/s"
        end = self.end_time or datetime.now()
        elapsed = (end - self.start_time).total_seconds()
        if elapsed == 0:
            return "-- files/s"
        return f"{self.files_processed / elapsed:.1f} files/s"

    def copy(self) -> ConversionStats:
        return dataclasses.replace(self)


class StatsPanel(Static):
    """Real-time statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(ConversionStats())

    def update_display(self, stats: ConversionStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}  {stats.rate}

[b]MESSAGES[/b]
  Found       [cyan]{stats.files_total:,}[/]
  Written     [green]{stats.files_processed:,}[/]
  Chunks      [magenta]{stats.chunks_written:,}[/]

[b]ARCHIVE[/b]
  Size        [cyan]{stats.total_bytes / 1024:.1f} KB[/]""")


class CurrentFileDisplay(Static):
    """Display for the last file of the most recent chunk."""

    def compose(self) -> ComposeResult:
        yield Static("[dim]Waiting for source...[/]", id="current-file-content")

    def update_file(self, file: str) -> None:
        content = self.query_one("#current-file-content", Static)
        if file:
            display = file if len(file) < 50 else "..." + file[-47:]
            content.update(f"[bold cyan]>[/] {display}")
        else:
            content.update("[dim]Waiting for source...[/]")


class ChunkLogTable(DataTable):
    """Live log of written chunks."""

    def on_mount(self) -> None:
        self.add_columns("Chunk", "Last file", "Written", "Progress")
        self.cursor_type = "row"

    def add_chunk(self, index: int, progress: ConversionProgress) -> None:
        display_name = Path(progress.current).name if progress.current else "--"
        if len(display_name) > 30:
            display_name = display_name[:27] + "..."
        percent = f"{progress.fraction:.0%}" if progress.total else "--"
        self.add_row(
            str(index), display_name, f"{progress.processed}/{progress.total}", percent
        )
        self.scroll_end()


class ConversionDeck(App):
    """The emlbox Conversion Deck."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: ConversionStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class ChunkWritten(Message):
        def __init__(self, index: int, progress: ConversionProgress) -> None:
            self.index = index
            self.progress = progress
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        border: round $primary;
        margin-bottom: 1;
    }

    CurrentFileDisplay {
        height: 3;
        padding: 1;
        border: round $secondary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    ChunkLogTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #progress-container {
        height: 3;
        margin-bottom: 1;
    }

    #log-panel {
        height: 12;
        border: round $primary-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
    }

    #output-info {
        height: auto;
        padding: 1;
        border: round $accent;
    }
    """

    BINDINGS = [
        Binding("c", "convert", "Convert", show=True),
        Binding("x", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "emlbox Conversion Deck"
    SUB_TITLE = "eml -> mbox"

    def __init__(
        self,
        output_dir: Path | str = ".",
        options: ConvertOptions = DEFAULT_OPTIONS,
        browse_root: Path | str | None = None,
    ) -> None:
        super().__init__()
        self.output_dir = Path(output_dir)
        self.options = options
        self.browse_root = Path(browse_root) if browse_root else Path.cwd()
        self.run_stats = ConversionStats()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("CONVERSION", classes="section-title")
                yield StatsPanel()
                yield CurrentFileDisplay()
                yield Rule()
                yield Label("Source Path")
                yield Input(placeholder="Enter .eml file or folder...", id="source-input")
                with Horizontal(id="action-buttons"):
                    yield Button("CONVERT", id="convert-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")
                yield Rule()
                with Container(id="output-info"):
                    yield Static(
                        f"[b]Output[/]\n[dim]{self.output_dir / self.options.output_name}[/]",
                        id="output-label",
                    )

            with Vertical(id="center-panel"):
                yield Label("CHUNKS", classes="section-title")
                with Container(id="progress-container"):
                    yield ProgressBar(id="progress-bar", show_eta=False)
                yield ChunkLogTable(id="chunk-log")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(self.browse_root, id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Conversion Deck initialized")
        self._log("Enter a source path and press CONVERT to begin")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def on_conversion_deck_stats_updated(self, event: StatsUpdated) -> None:
        """Handle stats update from worker thread."""
        self.run_stats = event.stats
        self.query_one(StatsPanel).update_display(self.run_stats)
        self.query_one(CurrentFileDisplay).update_file(self.run_stats.current_file)
        if self.run_stats.files_total > 0:
            self.query_one("#progress-bar", ProgressBar).update(
                total=self.run_stats.files_total, progress=self.run_stats.files_processed
            )

    def on_conversion_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_conversion_deck_chunk_written(self, event: ChunkWritten) -> None:
        self.query_one("#chunk-log", ChunkLogTable).add_chunk(event.index, event.progress)

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "convert-btn":
            self.action_convert()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_clear(self) -> None:
        """Clear the logs and reset stats."""
        self.run_stats = ConversionStats()
        self.query_one(StatsPanel).update_display(self.run_stats)
        self.query_one(CurrentFileDisplay).update_file("")
        self.query_one("#chunk-log", ChunkLogTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.query_one("#progress-bar", ProgressBar).update(total=None, progress=0)
        self._log("Cleared - ready for new run")

    def action_convert(self) -> None:
        """Start a conversion of the entered source."""
        source = self.query_one("#source-input", Input).value.strip()
        if not source:
            self._log("[red]ERROR: No source path specified[/]")
            return
        self.run_conversion(source)

    @work(exclusive=True, thread=True)
    def run_conversion(self, source: str) -> None:
        """Run the conversion in a background thread."""
        stats = ConversionStats(status="running", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"Converting {source}"))

        def on_progress(progress: ConversionProgress) -> None:
            stats.files_total = progress.total
            stats.files_processed = progress.processed
            stats.chunks_written += 1
            stats.current_file = str(progress.current or "")
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.ChunkWritten(stats.chunks_written, progress))

        converter = MboxConverter(self.options)
        try:
            result = converter.convert_path(source, self.output_dir, on_progress)
        except (ConversionError, OSError) as e:
            stats.status = "error"
            stats.end_time = datetime.now()
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.LogMessage(f"[red]ERROR: {type(e).__name__}: {e}[/]"))
            return

        stats.status = "complete"
        stats.current_file = ""
        stats.total_bytes = result.bytes_written
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {result.count} email(s) -> {result.destination}[/]"
            )
        )


def main() -> None:
    """Run the Conversion Deck TUI."""
    app = ConversionDeck()
    app.run()


if __name__ == "__main__":
    main()
