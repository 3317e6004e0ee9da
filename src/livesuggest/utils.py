"""
Utility functions for the livesuggest package.
"""

import json
from pathlib import Path
from typing import Any


def read_json_file(path: str | Path) -> Any:
    """
    Read and decode a UTF-8 JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        The decoded JSON document

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
