import os
import re
from ..cli_logger import logger
from ..errors import EntryPointError

PATCH_APPLIED = "applied"
PATCH_ALREADY_APPLIED = "already-applied"
PATCH_ANCHOR_NOT_FOUND = "anchor-not-found"
PATCH_SKIPPED = "skipped"


def insert_after_anchor(file_path: str, marker: str, anchor_pattern, line: str, strict: bool = False) -> str:
    """
    Inserts `line` right after the first match of `anchor_pattern` in a text file.

    Args:
        file_path: The file to patch. A missing file is a no-op.
        marker: If the file already contains this substring, nothing is written.
        anchor_pattern: A regular expression (string or compiled).
        line: The text placed on a new line after the anchor.
        strict: Raise EntryPointError instead of warning when the anchor is missing.

    Returns:
        One of PATCH_APPLIED, PATCH_ALREADY_APPLIED, PATCH_ANCHOR_NOT_FOUND, PATCH_SKIPPED.
    """
    if not os.path.exists(file_path):
        logger.warning(f"    - {file_path} not found. Skipping.")
        return PATCH_SKIPPED

    with open(file_path, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    if marker in content:
        logger.info(f"    - {os.path.basename(file_path)} already contains {marker}.")
        return PATCH_ALREADY_APPLIED

    content, count = re.subn(anchor_pattern, lambda m: m.group(0) + "\n" + line, content, count=1)
    if count == 0:
        message = f"Anchor {getattr(anchor_pattern, 'pattern', anchor_pattern)!r} not found in {file_path}"
        if strict:
            raise EntryPointError(message)
        logger.warning(f"    - {message}. {marker} was not registered.")

    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)

    if count == 0:
        return PATCH_ANCHOR_NOT_FOUND
    logger.success(f"    - Registered {marker} in {os.path.basename(file_path)}")
    return PATCH_APPLIED
