"""
Banner copy service tests.
"""

from banner_studio.services.copy_service import (
    MAIN_TEXT_MAX_CHARS,
    Brief,
    CopyService,
    validate_copy_lengths,
)


def _brief():
    return Brief(persona="Store owner", problem="Low click rates", benefit="More clicks")


def test_generate_stores_copy():
    service = CopyService()
    record = service.generate("brief-1", _brief())

    assert service.get(record.id) == record
    assert record.brief_id == "brief-1"
    assert record.main_text
    assert record.cta_text
    assert service.list_for_brief("brief-1") == [record]
    assert service.list_for_brief("brief-2") == []


def test_update_is_partial():
    service = CopyService()
    record = service.generate("brief-1", _brief())

    updated = service.update(record.id, sub_text="New sub")
    assert updated.sub_text == "New sub"
    assert updated.main_text == record.main_text
    assert updated.updated_at >= record.updated_at
    assert service.update("missing", main_text="x") is None


def test_to_copy_drops_record_fields():
    record = CopyService().generate("brief-1", _brief())
    copy = record.to_copy()
    assert copy.model_dump() == {
        "main_text": record.main_text,
        "sub_text": record.sub_text,
        "cta_text": record.cta_text,
    }


def test_delete():
    service = CopyService()
    record = service.generate("brief-1", _brief())
    assert service.delete(record.id) is True
    assert service.delete(record.id) is False


def test_validate_copy_lengths():
    assert validate_copy_lengths("a" * MAIN_TEXT_MAX_CHARS, "b" * 60, "c" * 15) is None
    assert "Main text" in validate_copy_lengths(main_text="a" * (MAIN_TEXT_MAX_CHARS + 1))
    assert "Sub text" in validate_copy_lengths(sub_text="b" * 61)
    assert "CTA text" in validate_copy_lengths(cta_text="c" * 16)
