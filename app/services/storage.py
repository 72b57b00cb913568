"""Local filesystem storage for ImageCrop.

Images live in two flat sibling directories ("buckets") under a configured
web root:

    {root}/Images/{name}          uploaded originals
    {root}/CroppedImages/{name}   crop outputs

Both directories are created lazily on first write.  The file name is the
only key; writes overwrite silently (last writer wins).
"""
from __future__ import annotations

import enum
import fnmatch
import logging
from pathlib import Path

from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class Bucket(str, enum.Enum):
    ORIGINALS = "originals"
    CROPPED = "cropped"


class LocalStorage:
    """Reads and writes image files under ``root``, one directory per bucket."""

    def __init__(
        self,
        root: Path | str,
        *,
        originals_dir: str = "Images",
        cropped_dir: str = "CroppedImages",
    ) -> None:
        self._root = Path(root)
        self._dirs = {
            Bucket.ORIGINALS: originals_dir,
            Bucket.CROPPED: cropped_dir,
        }

    def bucket_path(self, bucket: Bucket) -> Path:
        return self._root / self._dirs[bucket]

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    def list_names(self, bucket: Bucket) -> list[str]:
        directory = self.bucket_path(bucket)
        if not directory.is_dir():
            return []
        return sorted(p.name for p in directory.iterdir() if p.is_file())

    def exists(self, bucket: Bucket, name: str) -> bool:
        return self._file_path(bucket, name).is_file()

    def write(self, bucket: Bucket, name: str, data: bytes) -> Path:
        """Create or overwrite ``name`` in ``bucket`` and return its path."""

        path = self._file_path(bucket, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return path

    def read(self, bucket: Bucket, name: str) -> bytes:
        path = self._file_path(bucket, name)
        if not path.is_file():
            raise NotFoundError(self._dirs[bucket], name)
        logger.debug("Reading %s", path)
        return path.read_bytes()

    def find_by_pattern(self, bucket: Bucket, pattern: str) -> list[Path]:
        """Return files in ``bucket`` whose names glob-match ``pattern``.

        A missing bucket directory yields no matches rather than an error.
        """

        _check_name(pattern)
        directory = self.bucket_path(bucket)
        if not directory.is_dir():
            return []
        return sorted(
            p for p in directory.iterdir() if p.is_file() and fnmatch.fnmatchcase(p.name, pattern)
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _file_path(self, bucket: Bucket, name: str) -> Path:
        _check_name(name)
        return self.bucket_path(bucket) / name


def _check_name(name: str) -> None:
    """Reject anything that is not a plain, flat file name."""

    if not name or name in (".", "..") or "/" in name or "\\" in name or "\x00" in name:
        raise ValidationError("Invalid file name")
