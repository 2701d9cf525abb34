"""
PDF Shuffler - Application Module

This module contains the main application class for PDF Shuffler.
"""

from typing import Any

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, Gtk

from pdfshuffler.config import APP_DESCRIPTION, APP_ICON_NAME, APP_ID, APP_NAME, APP_VERSION
from pdfshuffler.utils.i18n import _
from pdfshuffler.utils.logger import logger
from pdfshuffler.window import PdfShufflerWindow


class PdfShufflerApp(Adw.Application):
    """Application class for PDF Shuffler."""

    def __init__(self) -> None:
        """Initialize the application."""
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.HANDLES_OPEN)

        self.connect("activate", self.on_activate)
        self.connect("open", self.on_open)

        self._setup_actions()

    def _setup_actions(self) -> None:
        """Set up application actions and their shortcuts."""
        about_action = Gio.SimpleAction.new("about", None)
        about_action.connect("activate", self.on_about_action)
        self.add_action(about_action)

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda *_: self.quit())
        self.add_action(quit_action)

        self.set_accels_for_action("app.quit", ["<Control>q"])
        self.set_accels_for_action("app.about", ["F1"])

    def _get_window(self) -> PdfShufflerWindow:
        win = self.get_active_window()
        if not isinstance(win, PdfShufflerWindow):
            win = PdfShufflerWindow(self)
        return win

    def on_activate(self, app: Adw.Application) -> None:
        """Callback for application activation."""
        win = self._get_window()
        win.present()
        logger.info(_("Application started successfully"))

    def on_open(self, app: Adw.Application, files: list, n_files: int, _hint: str) -> None:
        """Callback for opening files from command line or file manager."""
        win = self._get_window()
        win.present()

        paths = [gfile.get_path() for gfile in files if gfile.get_path()]
        if paths:
            win.submit_files(paths)

        logger.info(_("Opened {0} file(s)").format(n_files))

    def on_about_action(self, _action: Gio.SimpleAction, _param: Any) -> None:
        """Show about dialog."""
        about = Adw.AboutDialog()
        about.set_application_name(APP_NAME)
        about.set_application_icon(APP_ICON_NAME)
        about.set_version(APP_VERSION)
        about.set_license_type(Gtk.License.GPL_3_0)
        about.set_comments(APP_DESCRIPTION)
        about.present(self.get_active_window())
