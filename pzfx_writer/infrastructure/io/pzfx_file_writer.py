"""Serialization of a built Prism document to a ``.pzfx`` file."""

from pathlib import Path
from xml.etree import ElementTree as ET

from ...exceptions import PzfxWriteError


class PzfxFileWriter:
    pass

    def write(self, root: ET.Element, path: Path) -> Path:
        """Write the document with an XML declaration as UTF-8.

        Raises:
            PzfxWriteError: The file could not be written
        """
        tree = ET.ElementTree(root)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tree.write(path, xml_declaration=True, encoding="utf-8")
        except OSError as e:
            raise PzfxWriteError(f"Failed to write {path}: {e}") from e
        return path
