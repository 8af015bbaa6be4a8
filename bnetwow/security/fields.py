"""Optional response field whitelists for character and guild resources.

Callers may ask the service to include extra sections in a character or
guild profile. Unknown names are rejected locally, all at once, so a caller
can correct every typo in one pass.
"""

from collections.abc import Iterable

from bnetwow.errors import InvalidFields

CHARACTER_FIELDS: frozenset[str] = frozenset({
    "achievements",
    "appearance",
    "feed",
    "guild",
    "hunterPets",
    "items",
    "mounts",
    "pets",
    "petSlots",
    "professions",
    "progression",
    "pvp",
    "quests",
    "reputation",
    "stats",
    "talents",
    "titles",
})

GUILD_FIELDS: frozenset[str] = frozenset({
    "members",
    "achievements",
    "news",
    "challenge",
})


def validate_fields(whitelist: frozenset[str], requested: Iterable[str]) -> None:
    """Raise InvalidFields listing every requested name outside ``whitelist``."""
    invalid = [field for field in requested if field not in whitelist]
    if invalid:
        raise InvalidFields(invalid)


def validate_character_fields(requested: Iterable[str]) -> None:
    validate_fields(CHARACTER_FIELDS, requested)


def validate_guild_fields(requested: Iterable[str]) -> None:
    validate_fields(GUILD_FIELDS, requested)


def join_fields(fields: Iterable[str]) -> str:
    return ",".join(fields)
