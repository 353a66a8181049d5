"""
TLD Registry - static list of known TLDs and their registered second-level domains.

This module contains the read-only dataset behind the registry oracle:
- Generic TLDs (gTLDs): .com, .net, .org, .info, etc.
- Country Code TLDs (ccTLDs) with their public SLDs: .co.uk, .com.au, etc.
- New gTLDs: .app, .dev, .io, .xyz, etc.

The SLD lists cover the commonly registered public suffixes only and are not
exhaustive.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TLDEntry:
    """A top-level domain and the second-level domains registered under it."""

    tld: str
    slds: tuple[str, ...] = ()


def _entries(*tlds: str) -> list[TLDEntry]:
    return [TLDEntry(tld=tld) for tld in tlds]


# ============================================================================
# GENERIC TLDs (gTLDs)
# ============================================================================
GENERIC_TLDS = _entries(
    "com", "net", "org", "info", "biz", "name", "mobi", "pro", "edu", "gov",
    "mil", "int", "aero", "asia", "cat", "coop", "jobs", "museum", "tel", "travel",
)


# ============================================================================
# NEW gTLDs - Tech & Startup
# ============================================================================
TECH_TLDS = _entries(
    "app", "dev", "tech", "cloud", "digital", "software", "systems", "network",
    "solutions", "agency", "studio", "design", "media", "online", "site",
    "website", "host", "email", "link", "click", "page",
)


# ============================================================================
# NEW gTLDs - Popular & Generic
# ============================================================================
POPULAR_NEW_TLDS = _entries(
    "xyz", "store", "shop", "club", "live", "life", "world", "today", "space",
    "fun", "top", "vip", "one", "blog", "news", "company", "business", "group",
    "team", "work", "finance", "money", "bank", "law", "art", "music", "games",
)


# ============================================================================
# EUROPEAN ccTLDs
# ============================================================================
EUROPE_TLDS = [
    TLDEntry(tld="de"),
    TLDEntry(tld="eu"),
    TLDEntry(tld="at", slds=("co", "or")),
    TLDEntry(tld="ch"),
    TLDEntry(tld="li"),
    TLDEntry(tld="nl"),
    TLDEntry(tld="be"),
    TLDEntry(tld="fr", slds=("asso", "com", "gouv", "nom", "tm")),
    TLDEntry(tld="it"),
    TLDEntry(tld="es", slds=("com", "nom", "org", "gob", "edu")),
    TLDEntry(tld="pt", slds=("com", "org", "edu", "gov")),
    TLDEntry(tld="pl", slds=("com", "net", "org", "info", "biz", "waw")),
    TLDEntry(tld="cz"),
    TLDEntry(tld="sk"),
    TLDEntry(tld="hu", slds=("co", "info", "org")),
    TLDEntry(tld="ro", slds=("com", "org", "info", "nt")),
    TLDEntry(tld="gr", slds=("com", "edu", "net", "org", "gov")),
    TLDEntry(tld="tr", slds=("com", "net", "org", "biz", "info", "gen")),
    TLDEntry(tld="se"),
    TLDEntry(tld="dk"),
    TLDEntry(tld="no", slds=("co", "priv")),
    TLDEntry(tld="fi"),
    TLDEntry(tld="is"),
]


# ============================================================================
# UK & IRELAND
# ============================================================================
UK_TLDS = [
    TLDEntry(tld="uk", slds=("co", "org", "me", "ltd", "plc", "net", "ac", "gov", "sch")),
    TLDEntry(tld="ie"),
]


# ============================================================================
# AMERICAS
# ============================================================================
AMERICAS_TLDS = [
    TLDEntry(tld="us"),
    TLDEntry(tld="ca"),
    TLDEntry(tld="mx", slds=("com", "net", "org", "edu", "gob")),
    TLDEntry(tld="br", slds=("com", "net", "org", "gov", "edu", "art", "blog")),
    TLDEntry(tld="ar", slds=("com", "net", "org", "gob", "edu", "int")),
    TLDEntry(tld="cl"),
    TLDEntry(tld="co", slds=("com", "net", "org", "edu", "gov", "nom")),
    TLDEntry(tld="pe", slds=("com", "net", "org", "edu", "gob", "nom")),
]


# ============================================================================
# ASIA PACIFIC
# ============================================================================
ASIA_PACIFIC_TLDS = [
    TLDEntry(tld="au", slds=("com", "net", "org", "edu", "gov", "asn", "id")),
    TLDEntry(tld="nz", slds=("co", "net", "org", "ac", "geek", "gen", "kiwi", "school")),
    TLDEntry(tld="jp", slds=("co", "ne", "or", "ac", "go", "gr", "ed", "lg")),
    TLDEntry(tld="cn", slds=("com", "net", "org", "gov", "edu")),
    TLDEntry(tld="hk", slds=("com", "net", "org", "edu", "gov", "idv")),
    TLDEntry(tld="tw", slds=("com", "net", "org", "edu", "gov", "idv")),
    TLDEntry(tld="kr", slds=("co", "ne", "or", "re", "pe", "go", "ac")),
    TLDEntry(tld="in", slds=("co", "net", "org", "firm", "gen", "ind", "ac", "edu", "res")),
    TLDEntry(tld="sg", slds=("com", "net", "org", "edu", "gov", "per")),
    TLDEntry(tld="my", slds=("com", "net", "org", "edu", "gov", "name")),
    TLDEntry(tld="th", slds=("co", "in", "or", "ac", "go", "net")),
    TLDEntry(tld="id", slds=("co", "or", "web", "net", "ac", "go", "my")),
    TLDEntry(tld="ph", slds=("com", "net", "org", "edu", "gov")),
    TLDEntry(tld="vn", slds=("com", "net", "org", "edu", "gov", "biz", "info")),
]


# ============================================================================
# MIDDLE EAST & AFRICA
# ============================================================================
MEA_TLDS = [
    TLDEntry(tld="ae", slds=("co", "net", "org", "ac", "gov")),
    TLDEntry(tld="sa", slds=("com", "net", "org", "edu", "gov")),
    TLDEntry(tld="il", slds=("co", "org", "net", "ac", "gov", "muni")),
    TLDEntry(tld="za", slds=("co", "org", "net", "web", "ac", "gov")),
    TLDEntry(tld="ng", slds=("com", "org", "net", "edu", "gov", "name")),
    TLDEntry(tld="ke", slds=("co", "or", "ne", "ac", "go", "me")),
    TLDEntry(tld="eg", slds=("com", "net", "org", "edu", "gov")),
    TLDEntry(tld="ma", slds=("co", "net", "org", "ac", "gov", "press")),
]


# ============================================================================
# EASTERN EUROPE & CIS
# ============================================================================
CIS_TLDS = [
    TLDEntry(tld="ru", slds=("com", "net", "org", "pp", "msk", "spb")),
    TLDEntry(tld="ua", slds=("com", "net", "org", "in", "kiev", "gov")),
    TLDEntry(tld="by", slds=("com", "net", "org", "gov")),
    TLDEntry(tld="kz", slds=("com", "org", "edu", "gov")),
]


# ============================================================================
# SPECIAL / POPULAR ALTERNATIVE TLDs
# ============================================================================
SPECIAL_TLDS = [
    TLDEntry(tld="io"),
    TLDEntry(tld="ai", slds=("com", "net", "org", "off")),
    TLDEntry(tld="me"),
    TLDEntry(tld="tv"),
    TLDEntry(tld="cc"),
    TLDEntry(tld="ws"),
    TLDEntry(tld="fm"),
    TLDEntry(tld="gg", slds=("co", "net", "org")),
    TLDEntry(tld="to"),
    TLDEntry(tld="la"),
    TLDEntry(tld="ly", slds=("com", "net", "org")),
    TLDEntry(tld="vc", slds=("com", "net", "org")),
    TLDEntry(tld="im", slds=("co", "net", "org", "ac")),
    TLDEntry(tld="sh"),
    TLDEntry(tld="ac"),
]


# ============================================================================
# COMBINE ALL TLDs
# ============================================================================
DEFAULT_TLDS = (
    GENERIC_TLDS +
    TECH_TLDS +
    POPULAR_NEW_TLDS +
    EUROPE_TLDS +
    UK_TLDS +
    AMERICAS_TLDS +
    ASIA_PACIFIC_TLDS +
    MEA_TLDS +
    CIS_TLDS +
    SPECIAL_TLDS
)

# Total count for reference
TLD_COUNT = len(DEFAULT_TLDS)
