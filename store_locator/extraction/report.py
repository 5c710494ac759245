"""JSON report output for the Places jobs."""

import json
import os
from typing import Any


def write_json_report(data: Any, path: str) -> str:
    """Write data as indented UTF-8 JSON, creating parent dirs. Returns the path."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path
