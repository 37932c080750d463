import unittest

from test_property_store import DictStore
from version_up_plugin.property_store import ProjectHandle, VersionProperties
from version_up_plugin.version_core import BumpTarget
from version_up_plugin.version_up import NO_SELECTION_MESSAGE, TITLE, VersionUp


class RecordingSink:
    def __init__(self):
        self.notifications = []

    def __call__(self, title, message, is_error):
        self.notifications.append((title, message, is_error))


class VersionUpTests(unittest.TestCase):
    def make_workflow(self, handle, properties=None):
        self.sink = RecordingSink()
        self.log_lines = []
        return VersionUp(lambda: handle, self.sink, properties=properties, log=self.log_lines.append)

    def test_up_version_writes_and_notifies(self):
        store = DictStore({"AssemblyVersion": "1.2.3.7", "AssemblyFileVersion": "1.2.3.7"})
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        result = workflow.up_version(BumpTarget.MAJOR)

        self.assertEqual(result.new, "2.0.0.0")
        self.assertEqual(store.values, {"AssemblyVersion": "2.0.0.0", "AssemblyFileVersion": "2.0.0.0"})
        self.assertEqual(self.sink.notifications, [(TITLE, "Demo 1.2.3.7 -> 2.0.0.0", False)])
        self.assertTrue(self.log_lines)

    def test_up_version_reads_generic_version(self):
        store = DictStore({"Version": "3", "FileVersion": "3"})
        workflow = self.make_workflow(ProjectHandle("Core", store))

        result = workflow.up_version(BumpTarget.BUILD)

        self.assertEqual(result.summary, "3 -> 3.0.1")
        self.assertEqual(store.values, {"Version": "3.0.1", "FileVersion": "3.0.1"})

    def test_no_selection(self):
        workflow = self.make_workflow(None)

        self.assertIsNone(workflow.up_version(BumpTarget.MINOR))
        self.assertEqual(self.sink.notifications, [(TITLE, NO_SELECTION_MESSAGE, True)])
        self.assertEqual(self.log_lines, [])

    def test_missing_property(self):
        store = DictStore({"Title": "Demo"})
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        self.assertIsNone(workflow.up_version(BumpTarget.MINOR))
        self.assertEqual(len(self.sink.notifications), 1)
        self.assertTrue(self.sink.notifications[0][2])
        self.assertEqual(store.values, {"Title": "Demo"})

    def test_unparsable_version(self):
        store = DictStore({"AssemblyVersion": "1.0-beta"})
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        self.assertIsNone(workflow.up_version(BumpTarget.REVISION))
        title, message, is_error = self.sink.notifications[0]
        self.assertTrue(is_error)
        self.assertIn("1.0-beta", message)
        self.assertEqual(store.values, {"AssemblyVersion": "1.0-beta"})

    def test_refused_writes(self):
        store = DictStore({"Version": "1.0"}, refused={"Version", "AssemblyVersion", "AssemblyFileVersion", "FileVersion"})
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        self.assertIsNone(workflow.up_version(BumpTarget.MINOR))
        self.assertEqual(len(self.sink.notifications), 1)
        self.assertTrue(self.sink.notifications[0][2])
        self.assertEqual(store.values, {"Version": "1.0"})

    def test_custom_properties(self):
        store = DictStore({"version": "0.4"})
        properties = VersionProperties(read_names=("version",), write_names=("version",))
        workflow = self.make_workflow(ProjectHandle("Plugin", store), properties)

        workflow.up_version(BumpTarget.MINOR)

        self.assertEqual(store.values, {"version": "0.5"})

    def test_set_version_normalizes_and_writes(self):
        store = DictStore()
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        self.assertEqual(workflow.set_version(" 1.0 "), "1.0")
        self.assertEqual(store.values, {"AssemblyVersion": "1.0"})
        self.assertFalse(self.sink.notifications[0][2])

    def test_set_version_rejects_invalid_text(self):
        store = DictStore()
        workflow = self.make_workflow(ProjectHandle("Demo", store))

        self.assertIsNone(workflow.set_version("1.2.3.4.5"))
        self.assertEqual(store.values, {})
        self.assertTrue(self.sink.notifications[0][2])


if __name__ == "__main__":
    unittest.main()
