"""
PDF Shuffler - Window Module

Drop target window: files dropped on it are submitted as one batch to a
BatchCoordinator, whose state is polled on a GLib timer and rendered as a
spinner plus a status line.
"""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gdk, Gio, GLib, Gtk

from pdfshuffler.config import (
    APP_ICON_NAME,
    APP_NAME,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    WINDOW_STATE_KEY,
)
from pdfshuffler.constants import DEFAULT_MAX_WORKERS, POLL_INTERVAL_MS, SUMMARY_TIMEOUT_SECS
from pdfshuffler.services.batch import BatchCoordinator, BatchState
from pdfshuffler.services.pdf_operations import ShuffleOptions
from pdfshuffler.utils.config_manager import get_config_manager
from pdfshuffler.utils.i18n import _
from pdfshuffler.utils.logger import logger


class PdfShufflerWindow(Adw.ApplicationWindow):
    """Main window: drop PDFs, watch the batch progress."""

    def __init__(self, app: Adw.Application) -> None:
        """Initialize application window.

        Args:
            app: The parent Adw.Application instance
        """
        width, height = self._load_window_size()

        super().__init__(
            application=app,
            title=APP_NAME,
            default_width=width,
            default_height=height,
        )
        self.set_icon_name(APP_ICON_NAME)

        config = get_config_manager()
        self.coordinator = BatchCoordinator(
            ShuffleOptions.from_config(config),
            summary_timeout=float(config.get("batch.summary_timeout", SUMMARY_TIMEOUT_SECS)),
            max_workers=int(config.get("batch.max_workers", DEFAULT_MAX_WORKERS)),
        )

        self._poll_source_id: int | None = None

        self._setup_ui()
        self._setup_drag_and_drop()

        self.connect("close-request", self._on_close_request)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=10)
        box.set_valign(Gtk.Align.CENTER)
        box.set_margin_top(24)
        box.set_margin_bottom(24)
        box.set_margin_start(24)
        box.set_margin_end(24)

        heading = Gtk.Label(label=APP_NAME)
        heading.add_css_class("title-1")
        box.append(heading)

        box.append(Gtk.Label(label=_("Drag and drop PDF files here")))
        hint = Gtk.Label(label=_("to shuffle pages for double-sided scanning"))
        hint.add_css_class("dim-label")
        box.append(hint)

        self.spinner = Gtk.Spinner()
        self.spinner.set_margin_top(20)
        self.spinner.set_visible(False)
        box.append(self.spinner)

        self.status_label = Gtk.Label()
        self.status_label.set_wrap(True)
        box.append(self.status_label)

        # Shown while files hover over the window
        self.drop_overlay = Gtk.Label(label=_("Drop to shuffle PDF"))
        self.drop_overlay.add_css_class("title-2")
        self.drop_overlay.add_css_class("osd")
        self.drop_overlay.set_halign(Gtk.Align.FILL)
        self.drop_overlay.set_valign(Gtk.Align.FILL)
        self.drop_overlay.set_visible(False)

        overlay = Gtk.Overlay()
        overlay.set_child(box)
        overlay.add_overlay(self.drop_overlay)

        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(Adw.HeaderBar())
        toolbar_view.set_content(overlay)
        self.set_content(toolbar_view)

    def _setup_drag_and_drop(self) -> None:
        drop_target = Gtk.DropTarget.new(Gdk.FileList, Gdk.DragAction.COPY)
        drop_target.set_gtypes([Gdk.FileList])
        drop_target.connect("drop", self._on_drop)
        drop_target.connect("enter", self._on_drag_enter)
        drop_target.connect("leave", self._on_drag_leave)
        self.add_controller(drop_target)

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------

    def _on_drag_enter(self, _target: Gtk.DropTarget, _x: float, _y: float) -> Gdk.DragAction:
        if self.coordinator.is_processing():
            return Gdk.DragAction(0)
        self.drop_overlay.set_visible(True)
        return Gdk.DragAction.COPY

    def _on_drag_leave(self, _target: Gtk.DropTarget) -> None:
        self.drop_overlay.set_visible(False)

    def _on_drop(self, _target: Gtk.DropTarget, value, _x: float, _y: float) -> bool:
        """Handle file drop events for both single and multiple files."""
        self.drop_overlay.set_visible(False)

        paths = [f.get_path() for f in value.get_files() if isinstance(f, Gio.File)]
        paths = [p for p in paths if p]
        if not paths:
            logger.warning("No local files in drop data")
            return False

        logger.info(f"{len(paths)} files dropped")
        return self.submit_files(paths)

    # ------------------------------------------------------------------
    # Batch processing
    # ------------------------------------------------------------------

    def submit_files(self, paths: list[str]) -> bool:
        """Start a batch for *paths* unless one is already running."""
        if not self.coordinator.submit(paths):
            return False

        self._render(self.coordinator.state)
        if self._poll_source_id is None:
            self._poll_source_id = GLib.timeout_add(POLL_INTERVAL_MS, self._on_poll_tick)
        return True

    def _on_poll_tick(self) -> bool:
        state = self.coordinator.poll()
        self._render(state)

        if state.is_processing or state.summary:
            return GLib.SOURCE_CONTINUE

        self._poll_source_id = None
        return GLib.SOURCE_REMOVE

    def _render(self, state: BatchState) -> None:
        self.spinner.set_visible(state.is_processing)
        self.spinner.set_spinning(state.is_processing)

        if state.is_processing:
            text = _("Processing {0}/{1}...").format(state.processed_count, state.pending_count)
        else:
            text = state.summary
        self.status_label.set_label(text)

    # ------------------------------------------------------------------
    # Window state
    # ------------------------------------------------------------------

    def _load_window_size(self) -> tuple[int, int]:
        config = get_config_manager()
        width = config.get(f"{WINDOW_STATE_KEY}.width", DEFAULT_WINDOW_WIDTH)
        height = config.get(f"{WINDOW_STATE_KEY}.height", DEFAULT_WINDOW_HEIGHT)
        return max(width, 300), max(height, 200)

    def _save_window_size(self) -> None:
        config = get_config_manager()
        width = self.get_width()
        height = self.get_height()

        if width > 0 and height > 0:
            config.set(f"{WINDOW_STATE_KEY}.width", width, save_immediately=False)
            config.set(f"{WINDOW_STATE_KEY}.height", height, save_immediately=True)

    def _on_close_request(self, _window: Gtk.Window) -> bool:
        self._save_window_size()

        if self._poll_source_id is not None:
            GLib.source_remove(self._poll_source_id)
            self._poll_source_id = None

        if self.coordinator.is_processing():
            logger.warning(_("Closing while files are still being processed"))
        return False
