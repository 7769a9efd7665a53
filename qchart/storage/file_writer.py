"""File persistence for downloaded chart images

Writes go to a temporary file beside the target and are renamed into place,
so a failed write never leaves a truncated chart behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

from qchart.exceptions import FileWriteError


_DEFAULT_MODE = 0o644


def _target_mode(target: Path) -> int:
    try:
        return target.stat().st_mode & 0o777
    except FileNotFoundError:
        return _DEFAULT_MODE


def write_bytes(path: Union[str, "os.PathLike[str]"], data: bytes) -> Path:
    """
    Atomically write data to path, replacing any existing file

    Args:
        path: Destination file; its parent directory must already exist
        data: Bytes to write

    Returns:
        The destination as a Path

    Raises:
        FileWriteError: If the temporary file cannot be written or renamed
    """
    target = Path(path)
    directory = target.parent

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(directory)
        )
    except OSError as e:
        raise FileWriteError(str(target), e.strerror or str(e)) from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600; keep the mode of the file being replaced
        os.chmod(tmp_name, _target_mode(target))
        os.replace(tmp_name, target)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise FileWriteError(str(target), e.strerror or str(e)) from e

    return target
