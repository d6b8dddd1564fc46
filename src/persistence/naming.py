"""Timestamped backup file names that never collide with earlier saves."""

from datetime import datetime, timezone
from pathlib import Path

BACKUP_PREFIX = "graph_backup"


def backup_path(save_dir: str | Path, now: datetime | None = None) -> Path:
    """Choose an unused report path inside save_dir.

    Format: graph_backup_{YYYYMMDD}_{HHMMSS}.txt, with _1, _2, ... appended
    when several saves land in the same second. The directory is created
    if absent.

    Args:
        save_dir: Backup directory.
        now: Timestamp to encode. Defaults to the current UTC time.

    Returns:
        Path to a file that does not exist yet.
    """
    save_dir = Path(save_dir)
    save_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now(timezone.utc)).strftime("%Y%m%d_%H%M%S")

    candidate = save_dir / f"{BACKUP_PREFIX}_{ts}.txt"
    suffix = 0
    while candidate.exists():
        suffix += 1
        candidate = save_dir / f"{BACKUP_PREFIX}_{ts}_{suffix}.txt"
    return candidate
