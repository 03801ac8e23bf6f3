"""
Presentation state for the search widget.

The filter and lookup stay pure; every mutation of what the page shows goes
through the handlers below, one synchronous call per user interaction.
"""
from dataclasses import dataclass, field

from models import WEATHER_TABLE
from weather_lookup import NOT_FOUND_MESSAGE, filter_cities, icon_url, lookup_city

# Element ids that make up the search control (the .dropdown wrapper).
SEARCH_CONTROL_IDS = ("searchForm", "cityInput", "suggestions", "getWeather")
SUGGESTION_ID_PREFIX = "suggestion-"


@dataclass(frozen=True)
class ResultView:
    found: bool
    city: str = ""
    country: str = ""
    weather: str = ""
    description: str = ""
    temperature: str = ""
    image_url: str = ""
    message: str = ""

    @classmethod
    def from_record(cls, record):
        return cls(
            found=True,
            city=record.city,
            country=record.country,
            weather=record.weather,
            description=record.description,
            temperature=f"{record.temp} °C",
            image_url=icon_url(record.icon),
        )

    @classmethod
    def not_found(cls):
        return cls(found=False, message=NOT_FOUND_MESSAGE)


@dataclass
class WidgetState:
    query_text: str = ""
    suggestions: list = field(default_factory=list)
    suggestions_visible: bool = False
    result_view: ResultView | None = None


@dataclass(frozen=True)
class SearchRegion:
    element_ids: frozenset = frozenset(SEARCH_CONTROL_IDS)
    prefixes: tuple = (SUGGESTION_ID_PREFIX,)

    def contains(self, target) -> bool:
        if not target:
            return False
        return target in self.element_ids or any(target.startswith(p) for p in self.prefixes)


def is_outside(region: SearchRegion, target) -> bool:
    return not region.contains(target)


def _hide_suggestions(state):
    state.suggestions = []
    state.suggestions_visible = False


def on_keystroke(state: WidgetState, text: str, table=WEATHER_TABLE):
    state.query_text = text
    matches = filter_cities(text, table)
    if not matches:
        # an empty dropdown shell is never shown
        _hide_suggestions(state)
        return state
    state.suggestions = [record.city for record in matches]
    state.suggestions_visible = True
    return state


def select_suggestion(state: WidgetState, city: str):
    state.query_text = city
    _hide_suggestions(state)
    return state


def submit(state: WidgetState, table=WEATHER_TABLE):
    record = lookup_city(state.query_text, table)
    if record is None:
        state.result_view = ResultView.not_found()
    else:
        state.result_view = ResultView.from_record(record)
    return state


# Dismissal rule: a pointer event outside the search control hides the list.
def on_pointer(state: WidgetState, region: SearchRegion, target):
    if is_outside(region, target):
        state.suggestions_visible = False
    return state
