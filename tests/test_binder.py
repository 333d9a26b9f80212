"""Tests for binding parsed documents to the level model."""

import logging

import pytest

from amber_levels.document import (
    NULL,
    ArrayValue,
    BoolValue,
    NumberValue,
    StringValue,
    parse_document,
)
from amber_levels.errors import LevelBindError
from amber_levels.levels import LevelBinder, LevelDefinition
from amber_levels.levels.binder import to_bool, to_double, to_int, to_str, to_str_list

from .samples import FULL_LEVEL, SCENARIO_A


def bind(text: str) -> LevelDefinition:
    return LevelBinder().bind(parse_document(text))


class TestCoercion:
    """Test the per-field coercion helpers."""

    def test_to_int(self) -> None:
        assert to_int(NumberValue(3.9)) == 3
        assert to_int(NumberValue(-3.9)) == -3
        assert to_int(StringValue("42")) == 42
        assert to_int(StringValue("4.7")) == 4
        assert to_int(StringValue(" -12 ")) == -12
        assert to_int(StringValue("abc")) == 0
        assert to_int(StringValue("")) == 0
        assert to_int(BoolValue(True)) == 0
        assert to_int(NULL) == 0
        assert to_int(None) == 0
        assert to_int(NumberValue(float("inf"))) == 0

    def test_to_int_large_values_follow_float_precision(self) -> None:
        assert to_int(NumberValue(2.0 ** 53)) == 2 ** 53
        document = parse_document(f'{{"levelWidth": {2 ** 53 + 1}}}')
        assert LevelBinder().bind(document).level_width == 2 ** 53

    def test_to_double(self) -> None:
        assert to_double(NumberValue(2.5)) == 2.5
        assert to_double(StringValue("2.5")) == 2.5
        assert to_double(StringValue(".5")) == 0.5
        assert to_double(StringValue("2.5px")) == 0.0
        assert to_double(ArrayValue([])) == 0.0

    def test_to_bool(self) -> None:
        assert to_bool(BoolValue(True)) is True
        assert to_bool(BoolValue(False)) is False
        assert to_bool(StringValue("true")) is True
        assert to_bool(StringValue("false")) is False
        assert to_bool(StringValue("True")) is False
        assert to_bool(StringValue("yes")) is False
        assert to_bool(NumberValue(1.0)) is False
        assert to_bool(NULL) is False

    def test_to_str(self) -> None:
        assert to_str(StringValue("x")) == "x"
        assert to_str(NumberValue(1.0), "fallback") == "fallback"
        assert to_str(NULL) == ""

    def test_to_str_list(self) -> None:
        assert to_str_list(ArrayValue([StringValue("a"), NumberValue(1.0), StringValue("b")])) == ["a", "", "b"]
        assert to_str_list(StringValue("solo")) == ["solo"]
        assert to_str_list(NULL) == []


class TestScenarios:
    """Test the reference scenarios."""

    def test_scenario_a(self) -> None:
        level = bind(SCENARIO_A)

        assert level.name == "Test"
        assert level.ground_y == 720
        assert len(level.platforms) == 1
        platform = level.platforms[0]
        assert (platform.x, platform.y) == (10, 20)
        assert platform.sprite_path == "p.png"
        assert platform.solid is True
        assert level.scrolling_enabled is False
        assert level.level_width == 1920
        assert level.items == []
        assert level.cutscenes == []

    def test_empty_object_gives_defaults(self) -> None:
        assert bind("{}") == LevelDefinition()

    def test_each_bind_returns_a_new_level(self) -> None:
        binder = LevelBinder()
        document = parse_document(SCENARIO_A)
        first = binder.bind(document)
        second = binder.bind(document)
        assert first == second
        assert first is not second
        assert first.platforms is not second.platforms


class TestFullLevel:
    """Test binding a level that uses every section."""

    @pytest.fixture
    def level(self) -> LevelDefinition:
        return bind(FULL_LEVEL)

    def test_top_level_scalars(self, level: LevelDefinition) -> None:
        assert level.name == 'Forest "Edge"'
        assert level.description == "First level.\nWatch out for wolves"
        assert level.player_spawn_x == 64
        assert level.player_spawn_y == 600
        assert level.level_width == 3840
        assert level.scrolling_enabled is True
        assert level.night_mode is True
        assert level.night_darkness == 0.65
        assert level.next_level == "levels/cave.json"
        assert level.music_path == "sounds/music.wav"

    def test_comment_entries_are_skipped(self, level: LevelDefinition) -> None:
        assert [layer.name for layer in level.parallax_layers] == ["sky", "hills"]
        assert [block.block_type for block in level.blocks] == ["GRASS", "STONE"]

    def test_platforms(self, level: LevelDefinition) -> None:
        first, second = level.platforms
        assert first.has_color_mask()
        assert (first.mask_red, first.mask_green, first.mask_blue) == (10, 20, 30)
        assert not second.has_color_mask()
        assert second.sprite_path == "assets/obstacle.png"
        assert second.solid is False

    def test_blocks(self, level: LevelDefinition) -> None:
        grass, stone = level.blocks
        assert grass.use_grid_coords is True
        assert grass.overlay == "SNOW"
        assert not grass.has_tint()
        assert stone.has_tint()
        assert (stone.tint_red, stone.tint_green, stone.tint_blue) == (200, 180, 160)

    def test_moving_block(self, level: LevelDefinition) -> None:
        block = level.moving_blocks[0]
        assert block.movement_pattern == "CIRCULAR"
        assert block.radius == 40.0
        assert block.speed == 1.5
        assert block.pause_time == 30

    def test_interactive_entities(self, level: LevelDefinition) -> None:
        door = level.doors[0]
        assert door.link_id == "gate"
        assert door.locked is True
        assert door.key_item_id == "iron_key"
        assert door.height == 128

        button = level.buttons[0]
        assert button.linked_door_ids == ["gate", "side"]
        assert button.button_type == "TIMED"
        assert button.timed_duration == 5000
        assert button.activated_by_player is True

        assert level.vaults[0].vault_type == "POTTERY"
        assert level.items[0].item_id == "iron_key"
        assert level.triggers[0].target == "levels/cave.json"

    def test_mob(self, level: LevelDefinition) -> None:
        mob = level.mobs[0]
        assert (mob.mob_type, mob.sub_type, mob.behavior) == ("quadruped", "wolf", "hostile")
        assert mob.wander_min_x == 600.0
        assert mob.wander_max_x == 1000.0

    def test_cutscene_frames(self, level: LevelDefinition) -> None:
        cutscene = level.cutscenes[0]
        assert cutscene.id == "intro"
        assert cutscene.play_on_level_start is True
        assert cutscene.play_once is True
        assert [frame.gif_path for frame in cutscene.frames] == ["cut/a.gif", "cut/b.gif"]
        assert cutscene.frames[0].text == "Long ago..."
        assert not cutscene.frames[1].has_text()


class TestMisshapedInput:
    """Test tolerance for unexpected document shapes."""

    def test_root_must_be_object(self) -> None:
        with pytest.raises(LevelBindError):
            bind("[1, 2, 3]")

    def test_unknown_keys_are_ignored(self) -> None:
        level = bind('{"name": "A", "mystery": [1, {"b": 2}], "platforms": [{"x": 1, "wobble": true}]}')
        assert level.name == "A"
        assert level.platforms[0].x == 1

    def test_wrong_type_for_string_keeps_default(self) -> None:
        level = bind('{"backgroundPath": 12, "name": null}')
        assert level.background_path == "assets/background.png"
        assert level.name == "Untitled Level"

    def test_wrong_type_for_number_gives_zero(self) -> None:
        level = bind('{"levelWidth": "wide", "groundY": true}')
        assert level.level_width == 0
        assert level.ground_y == 0

    def test_section_that_is_not_an_array(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="amber_levels"):
            level = bind('{"platforms": {"x": 1}}')
        assert level.platforms == []
        assert "platforms" in caplog.text

    def test_non_object_entries_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="amber_levels"):
            level = bind('{"items": [1, "x", {"itemName": "Gem"}, null]}')
        assert [item.item_name for item in level.items] == ["Gem"]
        assert "non-object" in caplog.text

    def test_comment_skip_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="amber_levels"):
            level = bind('{"mobs": [{"_comment": "wolves"}, {"subType": "wolf"}]}')
        assert len(level.mobs) == 1
        assert "comment" in caplog.text

    def test_comment_entry_with_other_fields_is_still_skipped(self) -> None:
        level = bind('{"doors": [{"_comment": "disabled", "x": 5, "linkId": "d"}]}')
        assert level.doors == []

    def test_comment_key_does_not_apply_to_frames(self) -> None:
        level = bind(
            '{"cutscenes": [{"id": "c", "frames": [{"_comment": "note", "gifPath": "a.gif"}]}]}'
        )
        assert [frame.gif_path for frame in level.cutscenes[0].frames] == ["a.gif"]

    def test_single_linked_door_string(self) -> None:
        level = bind('{"buttons": [{"linkedDoorIds": "gate"}]}')
        assert level.buttons[0].linked_door_ids == ["gate"]
