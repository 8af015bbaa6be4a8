"""Catalog of the community API resources under /wow/.

Each entry is a path template plus, for listing resources, the key the
list is wrapped in. Path arguments are percent-encoded when formatted.
"""

import string
from dataclasses import dataclass, field
from urllib.parse import quote

from bnetwow.errors import UnknownEndpoint


@dataclass(frozen=True)
class Endpoint:
    path: str
    collection_key: str | None = None
    defaults: dict[str, str] = field(default_factory=dict)

    @property
    def path_args(self) -> list[str]:
        return [name for _, name, _, _ in string.Formatter().parse(self.path) if name]

    def format_path(self, **path_args) -> str:
        # Empty arguments fall back to the defaults, e.g. realm "" -> "region"
        given = {k: v for k, v in path_args.items() if v is not None and v != ""}
        values = {**self.defaults, **given}
        missing = [name for name in self.path_args if name not in values]
        if missing:
            raise TypeError(f"Missing path arguments for '{self.path}': {missing}")
        return self.path.format(**{name: quote(str(values[name]), safe="") for name in self.path_args})


ENDPOINTS: dict[str, Endpoint] = {
    "achievement": Endpoint("achievement/{id}"),
    "auction_data": Endpoint("auction/data/{realm}"),
    "battle_pet_ability": Endpoint("battlePet/ability/{id}"),
    "battle_pet_species": Endpoint("battlePet/species/{id}"),
    # query: level, breedId, qualityId
    "battle_pet_stats": Endpoint("battlePet/stats/{id}"),
    "challenges": Endpoint("challenge/{realm}", "challenge", {"realm": "region"}),
    "character": Endpoint("character/{realm}/{name}"),
    "guild": Endpoint("guild/{realm}/{name}"),
    "item": Endpoint("item/{id}"),
    "item_set": Endpoint("item/set/{id}"),
    "pvp_leaderboard": Endpoint("leaderboard/{bracket}", "rows"),
    "quest": Endpoint("quest/{id}"),
    "realm_status": Endpoint("realm/status", "realms"),
    "recipe": Endpoint("recipe/{id}"),
    "spell": Endpoint("spell/{id}"),
    "battlegroups": Endpoint("data/battlegroups/", "battlegroups"),
    "races": Endpoint("data/character/races", "races"),
    "classes": Endpoint("data/character/classes", "classes"),
    "character_achievements": Endpoint("data/character/achievements", "achievements"),
    "guild_rewards": Endpoint("data/guild/rewards", "rewards"),
    "guild_perks": Endpoint("data/guild/perks", "perks"),
    "guild_achievements": Endpoint("data/guild/achievements", "achievements"),
    "item_classes": Endpoint("data/item/classes", "classes"),
    "talents": Endpoint("data/talents"),
    "pet_types": Endpoint("data/pet/types", "petTypes"),
}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpoint(name) from None
