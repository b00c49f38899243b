from .plugin import (
    with_call_receiver,
    with_call_receiver_manifest,
    with_java_files,
    with_native_storage_package,
)
from .project import ProjectConfig, load_project, save_manifest
