from .models import AspectDefinition

ZODIAC_SIGNS = (
    ("Aries", "aries"),
    ("Taurus", "taurus"),
    ("Gemini", "gemini"),
    ("Cancer", "cancer"),
    ("Leo", "leo"),
    ("Virgo", "virgo"),
    ("Libra", "libra"),
    ("Scorpio", "scorpio"),
    ("Sagittarius", "sagittarius"),
    ("Capricorn", "capricorn"),
    ("Aquarius", "aquarius"),
    ("Pisces", "pisces"),
)

# Evaluated in this order for every pair of bodies.
ASPECT_TYPES = (
    AspectDefinition("Conjunction", "conjunction", 0.0, 10.0, "major"),
    AspectDefinition("Sextile", "sextile", 60.0, 6.0, "major"),
    AspectDefinition("Square", "square", 90.0, 8.0, "major"),
    AspectDefinition("Trine", "trine", 120.0, 8.0, "major"),
    AspectDefinition("Opposition", "opposition", 180.0, 10.0, "major"),
    AspectDefinition("Semi-Sextile", "semisextile", 30.0, 3.0, "minor"),
    AspectDefinition("Semi-Square", "semisquare", 45.0, 3.0, "minor"),
    AspectDefinition("Sesquiquadrate", "sesquiquadrate", 135.0, 3.0, "minor"),
    AspectDefinition("Quincunx", "quincunx", 150.0, 3.0, "minor"),
)

# Display name -> Swiss Ephemeris house system code
HOUSE_SYSTEMS = {
    "Placidus": b"P",
    "Koch": b"K",
    "Equal": b"E",
    "Whole Sign": b"W",
    "Campanus": b"C",
    "Regiomontanus": b"R",
}

DEFAULT_HOUSE_SYSTEM = "Placidus"
