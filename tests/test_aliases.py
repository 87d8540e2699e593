import pytest

from digger.commands import Command, CommandAliases


@pytest.mark.parametrize(
    "word, command",
    [
        ("n", Command.NORTH),
        ("north", Command.NORTH),
        ("s", Command.SOUTH),
        ("w", Command.WEST),
        ("e", Command.EAST),
        ("d", Command.DOWN),
        ("u", Command.UP),
        ("help", Command.HELP),
        ("dig", Command.DIG),
        ("l", Command.LOOK),
        ("look", Command.LOOK),
        ("i", Command.INVENTORY),
        ("inventory", Command.INVENTORY),
        ("take", Command.TAKE),
        ("drop", Command.DROP),
        ("equip", Command.EQUIP),
        ("unequip", Command.UNEQUIP),
        ("alias", Command.ALIAS),
    ],
)
def test_default_words(word, command):
    assert CommandAliases.default().resolve(word) is command


def test_resolve_is_case_insensitive_and_unknown_is_none():
    aliases = CommandAliases.default()
    assert aliases.resolve("LOOK") is Command.LOOK
    assert aliases.resolve("grab") is None
    assert aliases.resolve("") is None


def test_add_alias_then_resolve_any_case():
    aliases = CommandAliases.default()
    assert aliases.add_alias("take", "grab") is True
    assert aliases.resolve("GRAB") is Command.TAKE
    assert aliases.resolve("grab") is Command.TAKE
    assert aliases.aliases_for(Command.TAKE) == {"take", "grab"}


def test_add_alias_accepts_an_existing_alias_as_source():
    aliases = CommandAliases.default()
    assert aliases.add_alias("L", "Peek") is True
    assert aliases.resolve("peek") is Command.LOOK


def test_add_alias_for_unknown_command_fails():
    aliases = CommandAliases.default()
    assert aliases.add_alias("fly", "soar") is False
    assert aliases.resolve("soar") is None


def test_first_match_wins_and_every_matching_entry_grows():
    aliases = CommandAliases(
        [
            (["x"], Command.LOOK),
            (["x", "y"], Command.HELP),
        ]
    )
    assert aliases.resolve("x") is Command.LOOK
    assert aliases.resolve("y") is Command.HELP

    assert aliases.add_alias("x", "z") is True
    assert "z" in aliases.aliases_for(Command.LOOK)
    assert "z" in aliases.aliases_for(Command.HELP)
    assert aliases.resolve("z") is Command.LOOK


def test_movement_commands_know_their_direction():
    assert Command.NORTH.direction is not None
    assert Command.NORTH.direction.value == "north"
    assert Command.UP.direction.value == "up"
    assert Command.LOOK.direction is None
