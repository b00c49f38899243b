import os

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "target", "java")

JAVA_SOURCE_FILES = (
    "CallReceiver.java",
    "NativeNotificationHelper.java",
    "NativeStorageBridge.java",
    "NativeStoragePackage.java",
)


def _load_java_sources():
    sources = {}
    for file_name in JAVA_SOURCE_FILES:
        with open(os.path.join(TEMPLATE_DIR, file_name), "r", encoding="utf-8", newline="") as f:
            sources[file_name] = f.read()
    return sources


# file name -> Java source text, written verbatim into the project
JAVA_SOURCES = _load_java_sources()
