from .manifest import ensure_permissions, ensure_receiver, find_receiver, get_application, ANDROID_NAME
from .source_writer import write_source_files
from .entry_point import (
    insert_after_anchor,
    PATCH_APPLIED,
    PATCH_ALREADY_APPLIED,
    PATCH_ANCHOR_NOT_FOUND,
    PATCH_SKIPPED,
)
