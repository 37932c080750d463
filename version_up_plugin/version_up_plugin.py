# version_up_plugin.py - Main QGIS plugin class

from functools import partial
from pathlib import Path

from PyQt5.QtWidgets import QAction, QInputDialog, QLineEdit, QMessageBox
from PyQt5.QtCore import QSettings

from qgis.core import QgsMessageLog
from qgis.gui import QgisInterface

from .project_store import DEFAULT_SCOPE, select_current_project
from .property_store import VersionProperties
from .version_core import BumpTarget
from .version_up import TITLE, VersionUp


LOG_TAG = "VersionUp"
SETTINGS_GROUP = "VersionUp"


def load_settings():
    """Return (VersionProperties, project scope) from the QGIS user settings."""
    settings = QSettings()
    settings.beginGroup(SETTINGS_GROUP)
    try:
        properties = VersionProperties.from_strings(
            settings.value("readProperties", "", type=str),
            settings.value("writeProperties", "", type=str),
        )
        scope = settings.value("projectScope", DEFAULT_SCOPE, type=str) or DEFAULT_SCOPE
    finally:
        settings.endGroup()
    return properties, scope


class VersionUpPlugin:
    """Menu commands that bump the version of the current QGIS project."""

    def __init__(self, iface: QgisInterface):
        """Initialize the plugin.

        Args:
            iface: QGIS interface instance
        """
        self.iface = iface
        self.plugin_dir = Path(__file__).parent
        self.actions = []
        self.menu = "&VersionUp"

        properties, scope = load_settings()
        self.version_up = VersionUp(
            partial(select_current_project, scope),
            self.notify,
            properties=properties,
            log=self.log,
        )

        self.log("VersionUp Plugin initialized")

    def initGui(self):
        """Create the menu entries of the plugin."""
        for target in BumpTarget:
            self.add_action(
                f"Increase {target.label} Version",
                partial(self.run_up_version, target),
                f"Increment the {target.label.lower()} part of the project version",
                parent=self.iface.mainWindow(),
            )

        separator = QAction(self.iface.mainWindow())
        separator.setSeparator(True)
        self.iface.addPluginToMenu(self.menu, separator)
        self.actions.append(separator)

        self.add_action(
            "Set Version...",
            self.run_set_version,
            "Set the project version explicitly",
            parent=self.iface.mainWindow(),
        )
        self.add_action(
            "About VersionUp",
            self.show_about,
            "About this plugin",
            parent=self.iface.mainWindow(),
        )

        self.log("VersionUp Plugin GUI initialized")

    def unload(self):
        """Remove the plugin menu items."""
        for action in self.actions:
            self.iface.removePluginMenu(self.menu, action)
        self.actions = []

        self.log("VersionUp Plugin unloaded")

    def add_action(self, text: str, callback, tooltip: str = "", parent=None):
        """Add a menu entry to the plugin menu.

        Args:
            text: Text for the action
            callback: Function to call when action triggered
            tooltip: Tooltip text
            parent: Parent widget
        """
        action = QAction(text, parent)
        # triggered passes the checked flag, which the callbacks do not take
        action.triggered.connect(lambda checked=False: callback())
        if tooltip:
            action.setToolTip(tooltip)
            action.setStatusTip(tooltip)

        self.iface.addPluginToMenu(self.menu, action)
        self.actions.append(action)

        return action

    def log(self, message: str, level: int = 0):
        QgsMessageLog.logMessage(message, LOG_TAG, level)

    def notify(self, title: str, message: str, is_error: bool):
        """Show the outcome of a version update."""
        if is_error:
            self.log(message, 2)
            QMessageBox.critical(self.iface.mainWindow(), title, message)
        else:
            self.log(message)
            QMessageBox.information(self.iface.mainWindow(), title, message)

    def _report_failure(self, err: Exception):
        self.log(f"Error running VersionUp: {str(err)}", 2)
        QMessageBox.critical(
            self.iface.mainWindow(),
            "Error",
            f"Failed to update the version:\n\n{str(err)}"
        )

    def run_up_version(self, target: BumpTarget):
        """Bump ``target`` of the current project's version."""
        try:
            self.version_up.up_version(target)
        except Exception as e:
            self._report_failure(e)

    def run_set_version(self):
        """Ask for a version and write it into the current project."""
        try:
            text, accepted = QInputDialog.getText(
                self.iface.mainWindow(),
                TITLE,
                "Version (1-4 numbers separated by dots):",
                QLineEdit.Normal,
                "1.0.0.0",
            )
            if not accepted:
                return
            self.version_up.set_version(text)
        except Exception as e:
            self._report_failure(e)

    def show_about(self):
        """Show about dialog."""
        about_text = """
<h3>VersionUp</h3>
<p>Increment the version stored in the current QGIS project.</p>

<h4>Commands:</h4>
<ul>
    <li>Increase Major / Minor / Build / Revision Version</li>
    <li>Lower parts are reset to 0 (1.2.3.4 &rarr; 1.3.0.0)</li>
    <li>Short versions keep their length unless the bumped part
        needs more (3 &rarr; 3.0.1 for a build bump)</li>
    <li>Set Version... starts versioning a project</li>
</ul>

<p style="font-size: 0.9em; color: gray;">
The version is saved with the project; save the project to keep it.</p>
"""
        QMessageBox.about(
            self.iface.mainWindow(),
            "About VersionUp",
            about_text
        )
