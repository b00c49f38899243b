import os
from .cli_logger import logger
from .payloads import JAVA_SOURCES
from .utils import ensure_permissions, ensure_receiver, write_source_files, insert_after_anchor

REQUIRED_PERMISSIONS = (
    "android.permission.READ_PHONE_STATE",
    "android.permission.READ_CALL_LOG",
    "android.permission.WAKE_LOCK",
    "android.permission.POST_NOTIFICATIONS",
    "android.permission.USE_FULL_SCREEN_INTENT",
    "android.permission.VIBRATE",
)

CALL_RECEIVER_NAME = ".CallReceiver"
PHONE_STATE_ACTION = "android.intent.action.PHONE_STATE"

JAVA_PACKAGE = "com.junominu.junggaenote"

MAIN_APPLICATION_FILE = "MainApplication.kt"
NATIVE_PACKAGE_MARKER = "NativeStoragePackage"
PACKAGE_LIST_ANCHOR = r"PackageList\(this\)\.packages\.apply \{"
NATIVE_PACKAGE_LINE = "              add(NativeStoragePackage())"


def java_source_dir(platform_project_root):
    """app/src/main/java/<package path> under the native project root."""
    return os.path.join(platform_project_root, "app", "src", "main", "java", *JAVA_PACKAGE.split("."))


def with_call_receiver_manifest(project):
    """Add the phone-state permissions and the CallReceiver declaration to the manifest."""
    logger.info("  - Patching AndroidManifest.xml...")
    root = project.manifest_root

    added = ensure_permissions(root, REQUIRED_PERMISSIONS)
    receiver_added = ensure_receiver(root, CALL_RECEIVER_NAME, [PHONE_STATE_ACTION], enabled="true", exported="true")

    if added or receiver_added:
        logger.success(f"  - Manifest patched ({len(added)} permission(s) added, receiver {'added' if receiver_added else 'present'}).")
    else:
        logger.info("  - Manifest already up to date.")
    return project


def with_java_files(project):
    logger.info("  - Writing Java sources...")
    write_source_files(java_source_dir(project.platform_project_root), JAVA_SOURCES)
    logger.success(f"  - Wrote {len(JAVA_SOURCES)} Java source files.")
    return project


def with_native_storage_package(project, strict=False):
    """Register NativeStoragePackage() in MainApplication.kt's package list."""
    logger.info(f"  - Patching {MAIN_APPLICATION_FILE}...")
    main_application_path = os.path.join(java_source_dir(project.platform_project_root), MAIN_APPLICATION_FILE)
    insert_after_anchor(
        main_application_path,
        NATIVE_PACKAGE_MARKER,
        PACKAGE_LIST_ANCHOR,
        NATIVE_PACKAGE_LINE,
        strict=strict,
    )
    return project


def with_call_receiver(project, strict=False):
    """Run the manifest, Java source and entry-point steps in order."""
    project = with_call_receiver_manifest(project)
    project = with_java_files(project)
    project = with_native_storage_package(project, strict=strict)
    return project
