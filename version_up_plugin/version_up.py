"""Bump workflow shared by the QGIS plugin and tests.

The workflow only talks to injected collaborators: a selection provider
returning a ProjectHandle (or None), a notification sink and a log callable.
"""

import datetime

from .property_store import NoSelection, VersionProperties, read_version, write_version
from .version_core import VersionUpError, format_version, increment_version, parse_version


TITLE = "VersionUp"
NO_SELECTION_MESSAGE = "Please select the project!"


def _print_log(msg):
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[versionup {ts}] {msg}", flush=True)


class VersionUp:
    """Reads, bumps and writes back the version of the selected project."""

    def __init__(self, select_project, notify, properties=None, log=None):
        """Initialize the workflow.

        Args:
            select_project: Callable returning a ProjectHandle or None
            notify: Callable ``notify(title, message, is_error)``
            properties: VersionProperties with the candidate property names
            log: Callable taking one message string
        """
        self.select_project = select_project
        self.notify = notify
        self.properties = properties or VersionProperties()
        self.log = log or _print_log

    def _selected(self):
        handle = self.select_project()
        if handle is None:
            raise NoSelection(NO_SELECTION_MESSAGE)
        return handle

    def _report_error(self, err):
        self.notify(TITLE, str(err), True)

    def up_version(self, target):
        """Increment ``target`` of the selected project's version.

        Returns the BumpResult, or None when the failure was reported.
        """
        try:
            handle = self._selected()
            name, current = read_version(handle.store, self.properties.read_names)
            self.log(f"{handle.name}: read {name} = {current}")
            result = increment_version(current, target)
            written = write_version(handle.store, result.new, self.properties.write_names)
        except VersionUpError as err:
            self._report_error(err)
            return None

        self.log(f"{handle.name}: {target.label} bump wrote {', '.join(written)}")
        self.notify(TITLE, f"{handle.name} {result.summary}", False)
        return result

    def set_version(self, text):
        """Write ``text`` (normalized) as the selected project's version."""
        try:
            handle = self._selected()
            value = format_version(parse_version(text))
            written = write_version(handle.store, value, self.properties.write_names)
        except VersionUpError as err:
            self._report_error(err)
            return None

        self.log(f"{handle.name}: set version {value} in {', '.join(written)}")
        self.notify(TITLE, f"{handle.name} version set to {value}", False)
        return value
