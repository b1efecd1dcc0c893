from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


def _safe_user_dir(base_dir: Path, user_id: str) -> Path:
    # avoid path traversal
    if not user_id or any(ch in user_id for ch in ["/", "\\"]) or ".." in user_id:
        raise ValueError("Invalid user_id")
    return base_dir / "users" / user_id


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class UserRecord:
    user_id: str
    email: str
    hashed_password: str
    full_name: Optional[str]
    created_at: str
    is_active: bool = True


class UsersStore:
    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def _user_path(self, user_id: str) -> Path:
        return _safe_user_dir(self.base_dir, user_id) / "user.json"

    def _load(self, p: Path) -> UserRecord:
        raw = json.loads(p.read_text(encoding="utf-8"))
        return UserRecord(
            user_id=raw["user_id"],
            email=raw["email"],
            hashed_password=raw["hashed_password"],
            full_name=raw.get("full_name"),
            created_at=raw["created_at"],
            is_active=bool(raw.get("is_active", True)),
        )

    def get(self, user_id: str) -> Optional[UserRecord]:
        p = self._user_path(user_id)
        if not p.exists():
            return None
        return self._load(p)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Users are stored by id, so we scan users/*/user.json for the email.
        Fine at this scale; an email index file would replace the scan.
        """
        users_dir = self.base_dir / "users"
        if not users_dir.exists():
            return None

        wanted = normalize_email(email)
        for user_dir in users_dir.iterdir():
            p = user_dir / "user.json"
            if not p.is_file():
                continue
            rec = self._load(p)
            if rec.email == wanted:
                return rec
        return None

    def create(self, email: str, hashed_password: str, full_name: Optional[str] = None) -> UserRecord:
        if self.find_by_email(email) is not None:
            raise FileExistsError("User exists")

        rec = UserRecord(
            user_id=str(uuid.uuid4()),
            email=normalize_email(email),
            hashed_password=hashed_password,
            full_name=full_name,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

        p = self._user_path(rec.user_id)
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(".tmp")
        tmp.write_text(json.dumps(asdict(rec), ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(p)
        return rec
