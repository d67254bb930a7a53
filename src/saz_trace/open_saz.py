from pathlib import Path
from typing import Union

from .archive import SazArchive
from .readers.saz_reader import SazReader


def detect_format(path: Union[str, Path]) -> str:
    """
    Detect the format of a capture file from its path.

    Args:
        path: Path to the capture file (as string or Path object)

    Returns:
        Format string: "saz"

    Raises:
        ValueError: If the format cannot be determined from the path
    """
    ext = Path(path).suffix.lower()

    if ext == ".saz":
        return "saz"
    raise ValueError(
        f"Unsupported capture file extension: {ext}. Supported formats: .saz"
    )


def open_saz(path: Union[str, Path]) -> SazArchive:
    """
    Factory function to open a .saz file and return its SazArchive.

    The returned archive will have 'path' and 'format' metadata set.

    Raises FileNotFoundError for a missing file, ValueError for an unsupported
    extension and InvalidStructureError when no session pairs are found.
    """
    format = detect_format(path)

    path_obj = Path(path)
    if not path_obj.is_file():
        raise FileNotFoundError(f"Capture file not found: {path}")

    archive = SazReader(path_obj.read_bytes()).archive
    archive.metadata["path"] = str(path)
    archive.metadata["format"] = format
    return archive
