"""Relative path of a page file under a base directory."""

from pathlib import Path


def relative_path(base_dir: str | Path, full_path: str | Path) -> str:
    """Return the POSIX path of full_path relative to base_dir.

    Args:
        base_dir: Directory the result is relative to
        full_path: Path of a file somewhere under base_dir

    Raises:
        ValueError: If full_path is not under base_dir
    """
    base = Path(base_dir).expanduser().absolute()
    full = Path(full_path).expanduser().absolute()
    try:
        return full.relative_to(base).as_posix()
    except ValueError:
        raise ValueError(f"Path '{full}' is not under '{base}'") from None
