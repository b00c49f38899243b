import os
from .cli_logger import logger
from . import config as config_module
from . import plugin
from .payloads import JAVA_SOURCES
from .project import load_project, save_manifest
from .utils import ANDROID_NAME, find_receiver


def _resolve_paths(conf, path):
    settings = config_module.get_settings(conf)
    android_cfg = settings["android"]
    platform_project_root = os.path.join(path, android_cfg.get("project_root", "android"))
    manifest_file = android_cfg.get("manifest_file", config_module.DEFAULT_CONFIG["android"]["manifest_file"])
    return settings, platform_project_root, manifest_file


def prebuild_android(conf, path=".", strict=None, verbose=False):
    """Patch the native Android project under `path`.

    Errors (missing manifest, missing <application>, filesystem failures,
    a missing anchor in strict mode) propagate to the caller.
    """
    settings, platform_project_root, manifest_file = _resolve_paths(conf, path)
    if strict is None:
        strict = bool(settings.get("entry_point", {}).get("strict", False))

    logger.info(f"Running prebuild for {platform_project_root}...")
    if verbose:
        logger.info(f"Configuration: {settings}")

    project = load_project(platform_project_root, manifest_file)
    project = plugin.with_call_receiver(project, strict=strict)
    save_manifest(project)

    logger.success("Prebuild completed successfully.")
    return project


def check_project(conf, path="."):
    """Report whether the native project carries every patch.

    Returns a list of human-readable issues; an empty list means the project
    is fully patched.
    """
    _, platform_project_root, manifest_file = _resolve_paths(conf, path)
    issues = []

    if not os.path.isdir(platform_project_root):
        return [f"Android project directory not found at {platform_project_root}. Run 'expo prebuild' first."]

    manifest_path = os.path.join(platform_project_root, manifest_file)
    if not os.path.exists(manifest_path):
        issues.append(f"AndroidManifest.xml not found at {manifest_path}.")
    else:
        root = load_project(platform_project_root, manifest_file).manifest_root
        present = [node.get(ANDROID_NAME) for node in root.findall("uses-permission")]
        for permission in plugin.REQUIRED_PERMISSIONS:
            count = present.count(permission)
            if count == 0:
                issues.append(f"Missing permission {permission}.")
            elif count > 1:
                issues.append(f"Permission {permission} is declared {count} times.")
        application = root.find("application")
        if application is None:
            issues.append("Manifest has no <application> element.")
        elif find_receiver(application, plugin.CALL_RECEIVER_NAME) is None:
            issues.append(f"Receiver {plugin.CALL_RECEIVER_NAME} is not registered.")

    java_dir = plugin.java_source_dir(platform_project_root)
    for file_name, content in JAVA_SOURCES.items():
        file_path = os.path.join(java_dir, file_name)
        if not os.path.exists(file_path):
            issues.append(f"{file_name} is missing.")
            continue
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            if f.read() != content:
                issues.append(f"{file_name} is out of date.")

    main_application_path = os.path.join(java_dir, plugin.MAIN_APPLICATION_FILE)
    if not os.path.exists(main_application_path):
        issues.append(f"{plugin.MAIN_APPLICATION_FILE} not found at {main_application_path}.")
    else:
        with open(main_application_path, "r", encoding="utf-8") as f:
            if plugin.NATIVE_PACKAGE_MARKER not in f.read():
                issues.append(f"{plugin.NATIVE_PACKAGE_MARKER} is not registered in {plugin.MAIN_APPLICATION_FILE}.")

    return issues
