import logging

from models import WEATHER_TABLE, ICON_URL_TEMPLATE

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found in our Madagascar data."


# Lowercases for case-insensitive comparisons; trimming is left to the caller.
def _norm(string):
    return (string or "").lower()


# Returns records whose city starts with the fragment, keeping table order.
def filter_cities(fragment: str, table=WEATHER_TABLE):
    """
    Case-insensitive prefix match on city name.
    An empty fragment yields no suggestions rather than the whole table.
    """
    want = _norm(fragment)
    if not want:
        return []

    matches = []
    for record in table:
        if _norm(record.city).startswith(want):
            matches.append(record)
    logger.debug("filter %r -> %d suggestion(s)", fragment, len(matches))
    return matches


# Returns the first record whose city equals the trimmed text, or None.
def lookup_city(text: str, table=WEATHER_TABLE):
    """
    Case-insensitive exact match after trimming surrounding whitespace.
    Duplicate city names resolve to the earliest entry in the table.
    """
    want = _norm((text or "").strip())
    for record in table:
        if _norm(record.city) == want:
            logger.debug("lookup %r -> %s", text, record.city)
            return record
    logger.debug("lookup %r -> no match", text)
    return None


def icon_url(icon: str) -> str:
    return ICON_URL_TEMPLATE.format(icon=icon)
