import os
import shutil
import tempfile
import unittest
import xml.etree.ElementTree as ET
from callreceiver import plugin
from callreceiver.errors import ManifestError
from callreceiver.payloads import JAVA_SOURCES
from callreceiver.project import ProjectConfig, load_project, save_manifest, serialize_manifest
from callreceiver.utils.manifest import ANDROID_NAME

MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android" xmlns:tools="http://schemas.android.com/tools">
  <application android:name=".MainApplication" android:label="@string/app_name" tools:targetApi="31">
    <activity android:name=".MainActivity" android:exported="true"/>
  </application>
</manifest>
"""

MAIN_APPLICATION_KT = """package com.junominu.junggaenote

class MainApplication : Application(), ReactApplication {
  override val reactNativeHost: ReactNativeHost = ReactNativeHostWrapper(
        this,
        object : DefaultReactNativeHost(this) {
          override fun getPackages(): List<ReactPackage> =
            PackageList(this).packages.apply {
              // add(MyReactNativePackage())
            }
        }
  )
}
"""


class TestWithCallReceiver(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.android_dir = os.path.join(self.test_dir, "android")
        self.manifest_path = os.path.join(self.android_dir, "app", "src", "main", "AndroidManifest.xml")
        self.java_dir = plugin.java_source_dir(self.android_dir)
        self.main_application_path = os.path.join(self.java_dir, "MainApplication.kt")
        os.makedirs(self.java_dir)
        with open(self.manifest_path, "w", encoding="utf-8") as f:
            f.write(MANIFEST)
        with open(self.main_application_path, "w", encoding="utf-8") as f:
            f.write(MAIN_APPLICATION_KT)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _run(self):
        project = load_project(self.android_dir)
        project = plugin.with_call_receiver(project)
        save_manifest(project)
        return project

    def _snapshot(self):
        snapshot = {}
        for root, _, files in os.walk(self.android_dir):
            for name in files:
                path = os.path.join(root, name)
                with open(path, "rb") as f:
                    snapshot[path] = f.read()
        return snapshot

    def test_java_source_dir(self):
        self.assertEqual(
            self.java_dir,
            os.path.join(self.android_dir, "app", "src", "main", "java", "com", "junominu", "junggaenote"),
        )

    def test_full_sequence_from_empty_manifest(self):
        project = self._run()

        root = project.manifest_root
        self.assertEqual(
            [node.get(ANDROID_NAME) for node in root.findall("uses-permission")],
            list(plugin.REQUIRED_PERMISSIONS),
        )
        receivers = root.findall("application/receiver")
        self.assertEqual(len(receivers), 1)
        self.assertEqual(receivers[0].get(ANDROID_NAME), ".CallReceiver")

        for file_name, content in JAVA_SOURCES.items():
            with open(os.path.join(self.java_dir, file_name), "r", encoding="utf-8", newline="") as f:
                self.assertEqual(f.read(), content)

        with open(self.main_application_path, "r", encoding="utf-8") as f:
            self.assertIn("packages.apply {\n              add(NativeStoragePackage())\n", f.read())

        with open(self.manifest_path, "rb") as f:
            written = f.read()
        self.assertIn(b'xmlns:android="http://schemas.android.com/apk/res/android"', written)
        self.assertIn(b'<receiver android:name=".CallReceiver" android:enabled="true" android:exported="true">', written)

    def test_second_run_changes_nothing(self):
        self._run()
        first = self._snapshot()
        self._run()
        self.assertEqual(self._snapshot(), first)

    def test_steps_return_the_project(self):
        project = load_project(self.android_dir)
        self.assertIs(plugin.with_call_receiver_manifest(project), project)
        self.assertIs(plugin.with_java_files(project), project)
        self.assertIs(plugin.with_native_storage_package(project), project)

    def test_missing_main_application_is_not_an_error(self):
        os.remove(self.main_application_path)
        self._run()
        self.assertFalse(os.path.exists(self.main_application_path))
        self.assertTrue(os.path.exists(os.path.join(self.java_dir, "CallReceiver.java")))

    def test_manifest_without_application_raises(self):
        tree = ET.ElementTree(ET.fromstring('<manifest xmlns:android="http://schemas.android.com/apk/res/android"/>'))
        project = ProjectConfig(self.android_dir, tree)
        with self.assertRaises(ManifestError):
            plugin.with_call_receiver(project)


class TestSerializeManifest(unittest.TestCase):

    def test_serialization_is_stable(self):
        tree = ET.ElementTree(ET.fromstring(MANIFEST.split("\n", 1)[1]))
        first = serialize_manifest(tree)
        reparsed = ET.ElementTree(ET.fromstring(first))
        self.assertEqual(serialize_manifest(reparsed), first)
        self.assertTrue(first.startswith(b"<?xml version='1.0' encoding='utf-8'?>"))
        self.assertIn(b'tools:targetApi="31"', first)

if __name__ == "__main__":
    unittest.main()
