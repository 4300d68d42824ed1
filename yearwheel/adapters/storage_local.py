from __future__ import annotations
import json, os, re
from typing import Any, Dict, Optional
from yearwheel.domain.ports import StoragePort, UserId

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.@-]+")


class StorageLocal(StoragePort):
    """Local filesystem storage for per-user wheel settings (one JSON file per user)."""

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    def _path(self, user_id: UserId) -> str:
        token = _UNSAFE_CHARS.sub("_", str(user_id).strip()) or "anonymous"
        return os.path.join(self.root, f"user_settings_{token}.json")

    def load_user_settings(self, user_id: UserId) -> Optional[Dict[str, Any]]:
        path = self._path(user_id)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} does not hold a JSON object.")
        return data

    def save_user_settings(self, user_id: UserId, payload: Dict[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self._path(user_id), "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)

    def delete_user_settings(self, user_id: UserId) -> None:
        path = self._path(user_id)
        if os.path.exists(path):
            os.remove(path)
