import os
from ..cli_logger import logger


def write_source_files(target_dir, files):
    """
    Writes each (file name, content) pair under target_dir, creating the
    directory if needed. Existing files are always overwritten.

    Filesystem errors are not caught.

    Returns:
        The list of written file paths.
    """
    os.makedirs(target_dir, exist_ok=True)

    written = []
    for file_name, content in files.items():
        file_path = os.path.join(target_dir, file_name)
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.step_info(f"Wrote {file_path}", indent=4)
        written.append(file_path)
    return written
