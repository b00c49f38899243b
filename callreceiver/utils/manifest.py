import xml.etree.ElementTree as ET
from ..cli_logger import logger
from ..errors import ManifestError

ANDROID_NS = "http://schemas.android.com/apk/res/android"
NS_ATTR = "{" + ANDROID_NS + "}"
ANDROID_NAME = NS_ATTR + "name"

# Keep the android: prefix when the tree is written back out.
ET.register_namespace("android", ANDROID_NS)


def android_attr(attribute: str) -> str:
    """Return the namespaced key for an android:* attribute."""
    return NS_ATTR + attribute


def get_application(root: ET.Element) -> ET.Element:
    """Return the <application> node of a manifest, or raise ManifestError."""
    application = root.find("application")
    if application is None:
        raise ManifestError("Manifest does not contain an <application> element to patch")
    return application


def _permission_insert_index(root: ET.Element) -> int:
    """Index right after the last uses-permission, or before <application> if there is none."""
    children = list(root)
    last_permission = None
    application_index = None
    for idx, node in enumerate(children):
        if node.tag == "uses-permission":
            last_permission = idx
        elif node.tag == "application" and application_index is None:
            application_index = idx
    if last_permission is not None:
        return last_permission + 1
    if application_index is not None:
        return application_index
    return len(children)


def ensure_permissions(root: ET.Element, permissions) -> list:
    """
    Adds each missing uses-permission to the manifest.

    Existing entries are matched on their exact android:name and left in
    place. Missing entries are appended after the existing ones in the
    order given.

    Args:
        root: The <manifest> element.
        permissions: Permission identifiers, e.g. "android.permission.VIBRATE".

    Returns:
        The identifiers that were added.
    """
    present = {node.get(ANDROID_NAME) for node in root.findall("uses-permission")}
    added = []
    for permission in permissions:
        if permission in present:
            continue
        node = ET.Element("uses-permission")
        node.set(ANDROID_NAME, permission)
        root.insert(_permission_insert_index(root), node)
        present.add(permission)
        added.append(permission)
        logger.step_info(f"+ uses-permission {permission}", indent=4)
    return added


def find_receiver(application: ET.Element, name: str):
    for receiver in application.findall("receiver"):
        if receiver.get(ANDROID_NAME) == name:
            return receiver
    return None


def ensure_receiver(root: ET.Element, name: str, actions, enabled="true", exported="true") -> bool:
    """
    Registers a broadcast receiver with one intent-filter unless one with
    the same android:name already exists. An existing receiver is not
    modified.

    Returns:
        True if the receiver was added.
    """
    application = get_application(root)
    if find_receiver(application, name) is not None:
        return False

    receiver = ET.Element("receiver")
    receiver.set(ANDROID_NAME, name)
    receiver.set(android_attr("enabled"), enabled)
    receiver.set(android_attr("exported"), exported)
    intent_filter = ET.SubElement(receiver, "intent-filter")
    for action in actions:
        ET.SubElement(intent_filter, "action").set(ANDROID_NAME, action)

    # Receivers stay grouped: the new one goes after the last existing receiver.
    children = list(application)
    insert_index = len(children)
    for idx, node in enumerate(children):
        if node.tag == "receiver":
            insert_index = idx + 1
    application.insert(insert_index, receiver)
    logger.step_info(f"+ receiver {name}", indent=4)
    return True
