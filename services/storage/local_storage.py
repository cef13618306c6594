"""
Local file storage implementation.
Appends calculation rows to a JSON Lines file.
"""

from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Any, Dict, List


class LocalStorage:
    """Handles local file operations for the calculation log."""

    def __init__(self, file_path: Path):
        """
        Initialize local storage.

        Args:
            file_path: Path to the JSON Lines log file
        """
        self.file_path = file_path

    def append(self, row: Dict[str, Any]) -> Path:
        """
        Append one row to the log file.

        Raises:
            OSError: If the write fails
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        with self.file_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
            f.flush()
            os.fsync(f.fileno())

        return self.file_path

    def load(self) -> List[Dict[str, Any]]:
        """
        Read all logged rows; unreadable lines are skipped.

        Returns:
            List of row dicts, oldest first
        """
        if not self.file_path.exists():
            return []

        rows = []
        with self.file_path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    rows.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return rows
