import datetime
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

from core.config_loader import config_loader

logger = logging.getLogger(__name__)


class StorageWriteError(Exception):
    """The snapshot report could not be written."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Failed to write report to {path}: {cause}")
        self.path = path
        self.cause = cause


class ReportStore:
    """
    Owns the snapshot report file.

    Writes go to a temporary file in the same directory which is then moved
    over the report with os.replace, so readers see either the old report or
    the new one and a failed write leaves the old report in place.
    """

    def __init__(self, path: Path, post_log_path: Optional[Path] = None):
        self.path = Path(path)
        self.post_log_path = Path(post_log_path) if post_log_path else None

    def write(self, text: str) -> int:
        """Replace the report with ``text``. Returns the number of bytes written."""
        data = text.encode("utf-8")
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error(f"Failed to write report {self.path}: {e}")
            raise StorageWriteError(self.path, e) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning(f"Could not remove temporary file {tmp_name}")
        logger.debug(f"Wrote {len(data)} bytes to {self.path}")
        return len(data)

    def read(self) -> str:
        """Return the current report, or '' when it does not exist or cannot be read."""
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except FileNotFoundError:
            logger.info(f"No report yet at {self.path}")
            return ""
        except OSError as e:
            logger.warning(f"Could not read report {self.path}: {e}")
            return ""

    def log_post(self, items: Iterable[Tuple[str, Any]]) -> None:
        """Replace the diagnostic post log with the latest raw posted fields, if enabled."""
        if self.post_log_path is None:
            return
        received = datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds")
        lines = [f"[{received}]"]
        lines.extend(f"    [{key}] => {value}" for key, value in items)
        try:
            with open(self.post_log_path, "w", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n\n")
        except OSError as e:
            logger.warning(f"Could not write post log {self.post_log_path}: {e}")


def create_report_store() -> ReportStore:
    """Build a store from the loaded station configuration."""
    return ReportStore(config_loader.get_report_path(), config_loader.get_post_log_path())


# Global instance
report_store = create_report_store()
