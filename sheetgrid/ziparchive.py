"""Reading and writing the zip container of a workbook package."""

from __future__ import annotations

import io
import os
import zipfile
from typing import IO, BinaryIO


class ZipReader:
    """Read-only access to the files stored in a zip archive."""

    def __init__(self, source: str | os.PathLike[str] | BinaryIO) -> None:
        self._zip = zipfile.ZipFile(source, "r")
        self._paths = [info.filename for info in self._zip.infolist() if not info.is_dir()]

    def __enter__(self) -> ZipReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def file_paths(self) -> list[str]:
        """Return the paths of the stored files, directories left out."""
        return list(self._paths)

    def file_data(self, name: str) -> bytes:
        """Return the bytes of ``name``; raises KeyError when it is not stored."""
        return self._zip.read(name)

    def close(self) -> None:
        self._zip.close()


class ZipWriter:
    """Write files into a new zip archive with deflate compression."""

    def __init__(self, target: str | os.PathLike[str] | BinaryIO) -> None:
        self._zip = zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED)

    def __enter__(self) -> ZipWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def add_file(self, path: str, data: bytes | str | IO[bytes]) -> None:
        """Store ``data`` under ``path``; text is encoded as UTF-8, streams are read out."""
        if isinstance(data, str):
            payload = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        elif isinstance(data, io.IOBase) or hasattr(data, "read"):
            payload = data.read()
        else:
            raise TypeError(f"cannot store {type(data).__name__} in a zip archive")
        self._zip.writestr(path, payload)

    def close(self) -> None:
        self._zip.close()