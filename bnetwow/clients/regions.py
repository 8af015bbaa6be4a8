"""Region catalog: region selector -> service host and supported locales."""

from dataclasses import dataclass

from bnetwow.errors import InvalidLocale, InvalidRegion


@dataclass(frozen=True)
class RegionEntry:
    code: str
    aliases: frozenset[str]
    host: str
    locales: tuple[str, ...]  # first entry is the region default

    @property
    def default_locale(self) -> str:
        return self.locales[0]


REGIONS: tuple[RegionEntry, ...] = (
    RegionEntry(
        code="US",
        aliases=frozenset({"US", "United States"}),
        host="us.api.battle.net",
        locales=("en_US", "es_MX", "pt_BR"),
    ),
    RegionEntry(
        code="EU",
        aliases=frozenset({"EU", "Europe"}),
        host="eu.battle.net",
        locales=("en_GB", "es_ES", "fr_FR", "ru_RU", "de_DE", "pt_PT", "it_IT"),
    ),
    RegionEntry(
        code="KR",
        aliases=frozenset({"KR", "Korea"}),
        host="kr.battle.net",
        locales=("ko_KR",),
    ),
    RegionEntry(
        code="TW",
        aliases=frozenset({"TW", "Taiwan"}),
        host="tw.battle.net",
        locales=("zh_TW",),
    ),
    RegionEntry(
        code="CN",
        aliases=frozenset({"ZH", "CN", "China"}),
        host="www.battle.com.cn",
        locales=("zh_CN",),
    ),
)

_BY_ALIAS: dict[str, RegionEntry] = {
    alias: entry for entry in REGIONS for alias in entry.aliases
}

_BY_HOST: dict[str, RegionEntry] = {entry.host: entry for entry in REGIONS}


def region_names() -> list[str]:
    """Every accepted region selector, sorted."""
    return sorted(_BY_ALIAS)


def get_region(region: str) -> RegionEntry:
    """Look up a region by code or full name (case-sensitive)."""
    try:
        return _BY_ALIAS[region]
    except KeyError:
        raise InvalidRegion(region) from None


def resolve(region: str, locale: str = "") -> tuple[str, str]:
    """Resolve a region selector and optional locale to ``(host, locale)``.

    An empty locale selects the region's default. A non-empty locale must be
    one the region serves.
    """
    entry = get_region(region)
    if not locale:
        return entry.host, entry.default_locale
    if locale not in entry.locales:
        raise InvalidLocale(region, locale)
    return entry.host, locale


def get_region_by_host(host: str) -> RegionEntry:
    """Look up the region served by ``host``."""
    try:
        return _BY_HOST[host]
    except KeyError:
        raise InvalidRegion(host) from None
