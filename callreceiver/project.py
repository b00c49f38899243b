import os
import xml.etree.ElementTree as ET
from .cli_logger import logger
from .utils.manifest import ANDROID_NS

DEFAULT_MANIFEST_FILE = os.path.join("app", "src", "main", "AndroidManifest.xml")

TOOLS_NS = "http://schemas.android.com/tools"

ET.register_namespace("android", ANDROID_NS)
ET.register_namespace("tools", TOOLS_NS)


class ProjectConfig:
    """The native Android project being prebuilt.

    `manifest` is the parsed AndroidManifest.xml. The plugin steps mutate it
    in place; `save_manifest` writes it back.
    """

    def __init__(self, platform_project_root, manifest, manifest_path=None):
        self.platform_project_root = platform_project_root
        self.manifest = manifest
        self.manifest_path = manifest_path

    @property
    def manifest_root(self):
        return self.manifest.getroot()


def load_project(platform_project_root, manifest_file=DEFAULT_MANIFEST_FILE):
    """Parse the project's manifest and return a ProjectConfig.

    FileNotFoundError and ET.ParseError propagate.
    """
    manifest_path = os.path.join(platform_project_root, manifest_file)
    logger.info(f"Loading Android manifest from {manifest_path}")
    tree = ET.parse(manifest_path)
    return ProjectConfig(platform_project_root, tree, manifest_path)


def serialize_manifest(tree):
    """Return the manifest as UTF-8 bytes with an XML declaration."""
    ET.indent(tree, space="    ")
    return ET.tostring(tree.getroot(), encoding="utf-8", xml_declaration=True) + b"\n"


def save_manifest(project):
    logger.info(f"Saving Android manifest to {project.manifest_path}")
    data = serialize_manifest(project.manifest)
    with open(project.manifest_path, "wb") as f:
        f.write(data)
