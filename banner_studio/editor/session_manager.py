"""
Editor Session Manager
======================

Keeps one BannerEditor per session with JSON save/resume.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, List
from datetime import datetime
import uuid

from ..models.banner_models import BannerConfig, TextElement
from .banner_editor import BannerEditor, EditorSettings

logger = logging.getLogger(__name__)


class EditorSession:
    """A banner editor plus session bookkeeping."""

    def __init__(self, session_id: str, editor: BannerEditor):
        self.session_id = session_id
        self.editor = editor
        self.created_at = datetime.now()
        self.updated_at: Optional[datetime] = None

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            **self.editor.to_dict()
        }


class EditorSessionManager:
    """Manages editor sessions. History lives in memory only."""

    def __init__(self, sessions_dir: Optional[Path] = None, settings: Optional[EditorSettings] = None):
        self.sessions_dir = sessions_dir or Path("sessions")
        self.sessions_dir.mkdir(parents=True, exist_ok=True)
        self.settings = settings or EditorSettings()
        self._cache: Dict[str, EditorSession] = {}
        logger.info(f"[SESSION-MANAGER] Initialized with sessions_dir={self.sessions_dir}")

    def _session_path(self, session_id: str) -> Path:
        return self.sessions_dir / f"{session_id}.json"

    def create_session(
        self,
        config: Optional[BannerConfig] = None,
        elements: Optional[List[TextElement]] = None,
        session_id: Optional[str] = None
    ) -> EditorSession:
        """Create a new session, replacing any cached one with the same id."""
        if session_id is None:
            session_id = str(uuid.uuid4())

        editor = BannerEditor(config=config, elements=elements, settings=self.settings)
        session = EditorSession(session_id, editor)
        self._cache[session_id] = session
        self._save_session(session)
        logger.info(f"[SESSION-MANAGER] Created session {session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[EditorSession]:
        """Get a session from memory, or resume it from disk."""
        if session_id in self._cache:
            return self._cache[session_id]

        session_path = self._session_path(session_id)
        if not session_path.exists():
            return None

        try:
            with open(session_path) as f:
                data = json.load(f)
            session = EditorSession(session_id, BannerEditor.from_dict(data, settings=self.settings))
            if data.get("created_at"):
                session.created_at = datetime.fromisoformat(data["created_at"])
            if data.get("updated_at"):
                session.updated_at = datetime.fromisoformat(data["updated_at"])
        except (OSError, ValueError) as e:
            logger.error(f"[SESSION-MANAGER] Error loading session {session_id}: {e}")
            return None

        self._cache[session_id] = session
        return session

    def save_session(self, session_id: str) -> bool:
        """Explicitly save session to disk."""
        session = self._cache.get(session_id)
        if session is None:
            return False
        session.touch()
        self._save_session(session)
        return True

    def delete_session(self, session_id: str) -> bool:
        """Remove a session from memory and disk."""
        found = self._cache.pop(session_id, None) is not None
        session_path = self._session_path(session_id)
        if session_path.exists():
            session_path.unlink()
            found = True
        if found:
            logger.info(f"[SESSION-MANAGER] Deleted session {session_id}")
        return found

    def _save_session(self, session: EditorSession) -> None:
        """Save session to disk."""
        with open(self._session_path(session.session_id), "w") as f:
            json.dump(session.to_dict(), f, indent=2, ensure_ascii=False)
