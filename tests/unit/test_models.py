"""Unit tests for request models and tool input validation."""

import pytest
from pydantic import TypeAdapter, ValidationError

from miro_mcp.inputs import (
    BulkCreateItemsInput,
    CreateStickyNoteInput,
    CreateTagInput,
    GetBoardItemsInput,
    ShareBoardInput,
)
from miro_mcp.models import (
    AnyItemSpec,
    ConnectorSpec,
    ItemUpdate,
    ShapeSpec,
    StickyNoteSpec,
    StickyNoteStyle,
    TextGeometry,
    TextSpec,
)

item_adapter = TypeAdapter(AnyItemSpec)


class TestItemVariants:
    def test_sticky_note_from_tagged_dict(self):
        spec = item_adapter.validate_python({"type": "sticky_note", "data": {"content": "A"}})

        assert isinstance(spec, StickyNoteSpec)
        assert spec.endpoint == "sticky_notes"
        assert spec.key == "sticky_note 'A'"
        payload = spec.to_payload()
        assert "type" not in payload
        assert payload["style"]["fillColor"] == "yellow"
        assert payload["position"] == {"x": 0, "y": 0, "origin": "center"}

    def test_camel_case_fields_accepted(self):
        spec = item_adapter.validate_python(
            {"type": "shape", "data": {"shape": "circle"}, "style": {"fillColor": "#ff0000"}}
        )

        assert isinstance(spec, ShapeSpec)
        assert spec.to_payload()["style"]["fillColor"] == "#ff0000"
        assert spec.key == "shape"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            item_adapter.validate_python({"type": "mindmap", "data": {"content": "x"}})

    def test_hex_sticky_colour_rejected(self):
        with pytest.raises(ValidationError):
            StickyNoteStyle(fill_color="#ff0000")

    def test_text_geometry_has_no_height(self):
        with pytest.raises(ValidationError):
            TextGeometry(width=100, height=50)

    def test_text_geometry_default_width(self):
        spec = TextSpec(data={"content": "Heading"})
        assert spec.to_payload()["geometry"] == {"width": 200}

    def test_sticky_note_accepts_geometry(self):
        spec = item_adapter.validate_python(
            {"type": "sticky_note", "data": {"content": "A"}, "geometry": {"width": 100}}
        )

        assert spec.to_payload()["geometry"] == {"width": 100}

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            item_adapter.validate_python(
                {"type": "card", "data": {"title": "x"}, "colour": "blue"}
            )


class TestConnectorAndUpdate:
    def test_connector_key_and_aliases(self):
        spec = ConnectorSpec.model_validate({"startItemId": "a", "endItemId": "b"})

        assert spec.key == "a->b"
        assert "captions" not in spec.to_payload()

    def test_update_key_is_item_id(self):
        update = ItemUpdate(id="i1", data={"data": {"content": "x"}})
        assert update.key == "i1"


class TestToolInputs:
    def test_listing_limit_minimum_is_ten(self):
        with pytest.raises(ValidationError):
            GetBoardItemsInput(board_id="b1", limit=5)
        assert GetBoardItemsInput(board_id="b1", limit=10).limit == 10

    def test_sticky_note_colour_must_be_a_name(self):
        with pytest.raises(ValidationError):
            CreateStickyNoteInput(board_id="b1", content="x", color="#ffff00")
        assert CreateStickyNoteInput(board_id="b1", content="x", color="light_blue").color.value == "light_blue"

    def test_tag_colour_must_be_a_name(self):
        with pytest.raises(ValidationError):
            CreateTagInput(board_id="b1", title="t", fill_color="orange")

    def test_whitespace_stripped_and_extras_forbidden(self):
        params = GetBoardItemsInput(board_id="  b1  ")
        assert params.board_id == "b1"
        with pytest.raises(ValidationError):
            GetBoardItemsInput(board_id="b1", colour="red")

    def test_bulk_input_rejects_bad_element_whole(self):
        with pytest.raises(ValidationError):
            BulkCreateItemsInput(
                board_id="b1",
                items=[
                    {"type": "sticky_note", "data": {"content": "ok"}},
                    {"type": "sticky_note", "data": {"content": "bad"}, "style": {"fillColor": "#000"}},
                ],
            )

    def test_bulk_input_parses_mixed_variants(self):
        params = BulkCreateItemsInput(
            board_id="b1",
            items=[
                {"type": "sticky_note", "data": {"content": "A"}},
                {"type": "text", "data": {"content": "B"}},
                {"type": "frame", "data": {"title": "C"}},
            ],
        )
        assert [item.type for item in params.items] == ["sticky_note", "text", "frame"]

    def test_share_role_defaults_to_viewer(self):
        params = ShareBoardInput(board_id="b1", email="a@example.com")
        assert params.role.value == "viewer"
        with pytest.raises(ValidationError):
            ShareBoardInput(board_id="b1", email="not-an-email")
