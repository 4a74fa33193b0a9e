import json

import pytest

from planar2d.bindings import (
    Action,
    InputActionMapper,
    KeySection,
    UnknownActionError,
    UnknownSectionError,
    action_from_string,
    load_bindings,
    parse_bindings,
    section_from_string,
)
from planar2d.input import Input, KeyAction

DATA = {
    "MOVEMENT": {
        "MOVE_UP": [87, 265],
        "MOVE_DOWN": [83, 264],
        "MOVE_LEFT": [65],
        "MOVE_RIGHT": [68],
    }
}


def test_section_from_string():
    assert section_from_string("MOVEMENT") is KeySection.MOVEMENT


def test_unknown_section_raises_with_message():
    with pytest.raises(UnknownSectionError, match="Unknown section: JUMPING"):
        section_from_string("JUMPING")


@pytest.mark.parametrize("action", list(Action))
def test_action_from_string_round_trip(action):
    assert action_from_string(action.name) is action


def test_unknown_action_raises_with_message():
    with pytest.raises(UnknownActionError, match="Unknown action: FLY"):
        action_from_string("FLY")


def test_parse_bindings_structure():
    bindings = parse_bindings(DATA)
    assert bindings[KeySection.MOVEMENT][Action.MOVE_UP] == [87, 265]
    assert set(bindings[KeySection.MOVEMENT]) == set(Action)


def test_parse_bindings_rejects_unknown_action():
    with pytest.raises(UnknownActionError):
        parse_bindings({"MOVEMENT": {"DANCE": [1]}})


def test_load_bindings_from_file(tmp_path):
    path = tmp_path / "KeyBindings.json"
    path.write_text(json.dumps(DATA), encoding="utf-8")
    assert load_bindings(path) == parse_bindings(DATA)


def test_load_bindings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bindings(tmp_path / "missing.json")


def test_mapper_keys_and_unbound():
    mapper = InputActionMapper(Input(), parse_bindings({"MOVEMENT": {"MOVE_LEFT": [65]}}))
    assert mapper.keys(KeySection.MOVEMENT, Action.MOVE_LEFT) == [65]
    with pytest.raises(KeyError):
        mapper.keys(KeySection.MOVEMENT, Action.MOVE_UP)


def test_action_down_follows_any_bound_key():
    inp = Input()
    mapper = InputActionMapper(inp, parse_bindings(DATA))
    assert mapper.action_down(KeySection.MOVEMENT, Action.MOVE_UP) is False
    inp.handle_key(265, KeyAction.PRESS)
    assert mapper.action_down(KeySection.MOVEMENT, Action.MOVE_UP) is True
    assert mapper.action_down(KeySection.MOVEMENT, Action.MOVE_DOWN) is False
    inp.handle_key(265, KeyAction.RELEASE)
    assert mapper.action_down(KeySection.MOVEMENT, Action.MOVE_UP) is False


def test_action_pressed_only_until_reset():
    inp = Input()
    mapper = InputActionMapper(inp, parse_bindings(DATA))
    inp.handle_key(65, KeyAction.PRESS)
    assert mapper.action_pressed(KeySection.MOVEMENT, Action.MOVE_LEFT) is True
    inp.reset_key_pressed()
    assert mapper.action_pressed(KeySection.MOVEMENT, Action.MOVE_LEFT) is False
    assert mapper.action_down(KeySection.MOVEMENT, Action.MOVE_LEFT) is True