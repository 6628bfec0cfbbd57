"""
Banner Copy Service
===================

Produces banner copy from a brief and keeps generated copies in memory.

Generation returns fixed placeholder copy; no text model is called.
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ..models.banner_models import BannerCopy

logger = logging.getLogger(__name__)


# Character limits enforced by the HTTP layer
MAIN_TEXT_MAX_CHARS = 30
SUB_TEXT_MAX_CHARS = 60
CTA_TEXT_MAX_CHARS = 15

MOCK_COPY = {
    "main_text": "制作時間を90%短縮",
    "sub_text": "AIが自動でプロ品質のバナーを生成",
    "cta_text": "今すぐ試す",
}


class Brief(BaseModel):
    """Persona / problem / benefit brief derived from an interview."""
    persona: str
    problem: str
    benefit: str
    required_words: List[str] = Field(default_factory=list)


class BannerCopyRecord(BannerCopy):
    """Stored banner copy linked to a brief."""
    id: str
    brief_id: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_copy(self) -> BannerCopy:
        return BannerCopy(main_text=self.main_text, sub_text=self.sub_text, cta_text=self.cta_text)


def validate_copy_lengths(
    main_text: Optional[str] = None,
    sub_text: Optional[str] = None,
    cta_text: Optional[str] = None
) -> Optional[str]:
    """Return the first violated length rule, or None if all fit."""
    if main_text and len(main_text) > MAIN_TEXT_MAX_CHARS:
        return f"Main text must be {MAIN_TEXT_MAX_CHARS} characters or fewer"
    if sub_text and len(sub_text) > SUB_TEXT_MAX_CHARS:
        return f"Sub text must be {SUB_TEXT_MAX_CHARS} characters or fewer"
    if cta_text and len(cta_text) > CTA_TEXT_MAX_CHARS:
        return f"CTA text must be {CTA_TEXT_MAX_CHARS} characters or fewer"
    return None


class CopyService:
    """Generates and stores banner copy."""

    def __init__(self):
        self._copies: Dict[str, BannerCopyRecord] = {}

    def generate(self, brief_id: str, brief: Brief) -> BannerCopyRecord:
        """Create banner copy for a brief."""
        logger.info(
            f"[COPY-SERVICE] Generating copy for brief={brief_id} "
            f"(required_words={len(brief.required_words)})"
        )
        record = BannerCopyRecord(id=uuid.uuid4().hex[:12], brief_id=brief_id, **MOCK_COPY)
        self._copies[record.id] = record
        return record

    def get(self, copy_id: str) -> Optional[BannerCopyRecord]:
        return self._copies.get(copy_id)

    def list_for_brief(self, brief_id: str) -> List[BannerCopyRecord]:
        return [c for c in self._copies.values() if c.brief_id == brief_id]

    def update(
        self,
        copy_id: str,
        main_text: Optional[str] = None,
        sub_text: Optional[str] = None,
        cta_text: Optional[str] = None
    ) -> Optional[BannerCopyRecord]:
        """Apply a partial update. Returns None if the copy does not exist."""
        record = self._copies.get(copy_id)
        if record is None:
            return None

        changes = {
            k: v for k, v in
            {"main_text": main_text, "sub_text": sub_text, "cta_text": cta_text}.items()
            if v is not None
        }
        changes["updated_at"] = datetime.now()
        updated = record.model_copy(update=changes)
        self._copies[copy_id] = updated
        return updated

    def delete(self, copy_id: str) -> bool:
        return self._copies.pop(copy_id, None) is not None
