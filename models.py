from dataclasses import dataclass, asdict

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"


@dataclass(frozen=True)
class WeatherRecord:
    city: str
    country: str
    weather: str  # short condition label, e.g. "Sunny"
    description: str
    temp: float  # degrees Celsius
    icon: str

    @property
    def icon_url(self):
        return ICON_URL_TEMPLATE.format(icon=self.icon)

    def to_dict(self):
        data = asdict(self)
        data["icon_url"] = self.icon_url
        return data

    def __repr__(self):
        return f"<WeatherRecord {self.city}, {self.country} {self.weather} {self.temp}>"


# Fixed reference data; built once at import and never mutated.
WEATHER_TABLE = (
    WeatherRecord("Antananarivo", "MG", "Sunny", "Clear sky and warm sunshine", 27, "01d"),
    WeatherRecord("Toamasina", "MG", "Rain", "Light rain showers", 24, "09d"),
    WeatherRecord("Fianarantsoa", "MG", "Cloudy", "Overcast with a cool breeze", 20, "03d"),
    WeatherRecord("Mahajanga", "MG", "Thunderstorm", "Stormy skies and lightning", 26, "11d"),
    WeatherRecord("Toliara", "MG", "Windy", "Dusty winds across the coast", 28, "50d"),
)


# Returns city names that occur more than once (case-insensitive), in table order.
def check_unique_cities(table=WEATHER_TABLE):
    seen = set()
    duplicates = []
    for record in table:
        key = record.city.lower()
        if key in seen and record.city not in duplicates:
            duplicates.append(record.city)
        seen.add(key)
    return duplicates
