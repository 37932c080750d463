# project_store.py - Version properties stored as QGIS project entries

from qgis.core import QgsProject

from .property_store import ProjectHandle


DEFAULT_SCOPE = "VersionUp"


class ProjectEntryStore:
    """Property store over the entries of a QgsProject."""

    def __init__(self, project: QgsProject, scope: str = DEFAULT_SCOPE):
        self.project = project
        self.scope = scope

    def read(self, name):
        value, found = self.project.readEntry(self.scope, name, "")
        if not found or not value.strip():
            return None
        return value

    def write(self, name, value):
        return bool(self.project.writeEntry(self.scope, name, value))


def select_current_project(scope: str = DEFAULT_SCOPE):
    """Return a handle for the open project, or None if it was never saved."""
    project = QgsProject.instance()
    if not project.fileName():
        return None
    name = project.title() or project.baseName()
    return ProjectHandle(name, ProjectEntryStore(project, scope))
