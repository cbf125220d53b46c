import json
import os
from typing import Any


class StorageService:
    @staticmethod
    def ensure_dir(path: str) -> None:
        os.makedirs(path, exist_ok=True)

    @staticmethod
    def read_json(path: str) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def read_json_or_default(path: str, default: Any) -> Any:
        """Parsed JSON at *path*, or *default* when the file does not exist.

        Malformed JSON still raises.
        """
        if not os.path.exists(path):
            return default
        return StorageService.read_json(path)

    @staticmethod
    def read_text(path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    @staticmethod
    def remove_if_exists(path: str) -> bool:
        """Delete *path*. Returns False if it was already gone."""
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        return True
