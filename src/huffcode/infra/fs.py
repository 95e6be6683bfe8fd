from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution, collision checks and the text and
binary read/write helpers used by the pipeline. Readers return None on
failure so that a missing input only skips the step that needed it.
"""

import logging
import os
from typing import List, Optional, Tuple

from huffcode.domain.constants import TEXT_ENCODING

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "huffcode"
UNIX_APP_DIR_NAME = ".huffcode"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/huffcode
    - Linux/Mac: ~/.huffcode

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_existing_output_files(output_dir: str, names: List[str]) -> List[str]:
    """
    Identify naming collisions in the target output directory.

    Args:
        output_dir: Directory to inspect.
        names: List of filenames to check for existence.

    Returns:
        List[str]: Absolute paths of files that already exist.
    """
    existing: List[str] = []
    for n in names:
        full = os.path.join(output_dir, n)
        if os.path.exists(full):
            existing.append(full)
    return existing


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# READ / WRITE API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> Optional[str]:
    """
    Read an entire text file as 8-bit characters.

    Args:
        path: File to read.

    Returns:
        Optional[str]: File contents, or None if the file could not be read.
    """
    try:
        with open(path, "r", encoding=TEXT_ENCODING, newline="") as f:
            content = f.read()
    except OSError as e:
        logger.warning(f"Could not read file '{path}': {e}")
        return None

    if not content:
        logger.warning(f"Empty file '{path}'.")
    return content


def read_binary_file(path: str) -> Optional[bytes]:
    """Read an entire binary file; None if it could not be read."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.warning(f"Could not read file '{path}': {e}")
        return None


def write_text_file(path: str, text: str) -> None:
    """
    Write text verbatim as 8-bit characters.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding=TEXT_ENCODING, newline="") as f:
        f.write(text)


def write_binary_file(path: str, data: bytes) -> None:
    """
    Write raw bytes.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "wb") as f:
        f.write(data)
