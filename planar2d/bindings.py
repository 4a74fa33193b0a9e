"""Named actions mapped to key codes, loaded from a JSON file."""

from __future__ import annotations

import json
from enum import Enum
from os import PathLike
from typing import Any, Mapping, Union

from planar2d import config
from planar2d.logger import LogType, log


class Action(Enum):
    """Game actions a key can trigger."""

    MOVE_UP = "MOVE_UP"
    MOVE_DOWN = "MOVE_DOWN"
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"


class KeySection(Enum):
    """Groups of bindings."""

    MOVEMENT = "MOVEMENT"


class UnknownSectionError(RuntimeError):
    """A binding file names a section that does not exist."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Unknown section: {section}")
        self.section = section


class UnknownActionError(RuntimeError):
    """A binding file names an action that does not exist."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Unknown action: {action}")
        self.action = action


Bindings = dict[KeySection, dict[Action, list[int]]]


def section_from_string(name: str) -> KeySection:
    """Return the section called ``name``."""
    try:
        return KeySection[name]
    except KeyError:
        log(LogType.ERROR, "UNKNOWN SECTION: " + name)
        raise UnknownSectionError(name) from None


def action_from_string(name: str) -> Action:
    """Return the action called ``name``."""
    try:
        return Action[name]
    except KeyError:
        log(LogType.ERROR, "UNKNOWN ACTION: " + name)
        raise UnknownActionError(name) from None


def parse_bindings(data: Mapping[str, Mapping[str, Any]]) -> Bindings:
    """Turn ``{section: {action: [codes]}}`` into typed bindings."""
    bindings: Bindings = {}
    for section_name, actions in data.items():
        section = section_from_string(section_name)
        inner = bindings.setdefault(section, {})
        for action_name, codes in actions.items():
            action = action_from_string(action_name)
            inner.setdefault(action, [int(code) for code in codes])
    return bindings


def load_bindings(path: Union[str, PathLike[str]] = config.KEY_BINDINGS_FILE) -> Bindings:
    """Read and parse a JSON key-binding file."""
    log(LogType.MESSAGE, "Started loading keybindings.")
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    bindings = parse_bindings(data)
    log(LogType.MESSAGE, "Finished loading keybindings.")
    return bindings


class InputActionMapper:
    """Answers action queries against an input state."""

    def __init__(self, input: Any, bindings: Bindings | None = None) -> None:
        self.input = input
        self.bindings = load_bindings() if bindings is None else bindings

    def keys(self, section: KeySection, action: Action) -> list[int]:
        """Key codes bound to ``action``; KeyError if unbound."""
        return list(self.bindings[section][action])

    def action_down(self, section: KeySection, action: Action) -> bool:
        """True while any bound key is held."""
        return any(self.input.key_held(key) for key in self.keys(section, action))

    def action_pressed(self, section: KeySection, action: Action) -> bool:
        """True if any bound key went down this frame."""
        return any(self.input.key_pressed(key) for key in self.keys(section, action))