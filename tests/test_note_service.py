"""
Note service tests against the seeded in-memory database (no HTTP layer).
"""
import pytest
from bson import ObjectId

from app.core.exceptions import InvalidId, NotFound, ValidationError
from app.services import note_service


class TestNoteService:

    @pytest.mark.asyncio
    async def test_list_without_filters_returns_every_owned_note(self, db, user):
        notes = await note_service.list_notes(db, user["_id"])

        assert len(notes) == await db["note"].count_documents({"userId": user["_id"]})
        assert {n["userId"] for n in notes} == {user["_id"]}

    @pytest.mark.asyncio
    async def test_list_combines_filters(self, db, user):
        notes = await note_service.list_notes(
            db, user["_id"], search_term="cats", folder_id="111111111111111111111101"
        )

        assert [str(n["_id"]) for n in notes] == ["000000000000000000000002", "000000000000000000000003"]

    @pytest.mark.asyncio
    async def test_list_rejects_malformed_tag_id(self, db, user):
        with pytest.raises(InvalidId) as exc:
            await note_service.list_notes(db, user["_id"], tag_id="nope")

        assert exc.value.message == "The `tagId` is not valid"

    @pytest.mark.asyncio
    async def test_get_raises_not_found_for_other_owner(self, db, other_user):
        with pytest.raises(NotFound):
            await note_service.get_note(db, other_user["_id"], "000000000000000000000000")

    @pytest.mark.asyncio
    async def test_create_sets_timestamps_and_dedupes_tags(self, db, user):
        doc = await note_service.create_note(
            db,
            user["_id"],
            {"title": "New", "tags": ["222222222222222222222200", "222222222222222222222200"]},
        )

        assert doc["createdAt"] == doc["updatedAt"]
        assert doc["tags"] == [ObjectId("222222222222222222222200")]
        assert "content" not in doc
        assert "folderId" not in doc

    @pytest.mark.asyncio
    async def test_create_requires_title(self, db, user):
        with pytest.raises(ValidationError) as exc:
            await note_service.create_note(db, user["_id"], {"content": "no title"})

        assert exc.value.message == "Missing `title` in request body"
        assert await db["note"].count_documents({"content": "no title"}) == 0

    @pytest.mark.asyncio
    async def test_update_validates_id_before_title(self, db, user):
        with pytest.raises(InvalidId):
            await note_service.update_note(db, user["_id"], "NOT-A-VALID-ID", {})

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, db, user):
        doc = await note_service.update_note(
            db, user["_id"], "000000000000000000000000", {"title": "t", "tags": []}
        )

        assert doc["tags"] == []
        assert doc["folderId"] == ObjectId("111111111111111111111100")

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, db, user):
        for note_id in ("000000000000000000000000", "000000000000000000000000", "NOT-A-VALID-ID"):
            assert await note_service.delete_note(db, user["_id"], note_id) is None

        assert await db["note"].find_one({"_id": ObjectId("000000000000000000000000")}) is None
