"""
Lookup tables and configuration constants for the sensory pairing engine.

Research: Byrnes, N. K., & Hayes, J. E. (2015). Personality factors predict
spicy food liking and intake. Food Quality and Preference.
"""

import logging
import os
from types import MappingProxyType

LOG_LEVEL_ENV_VAR = "SENSORY_PAIRING_LOG_LEVEL"

# Genre arousal weights (0-30 points)
GENRE_WEIGHTS = MappingProxyType({
    # High arousal
    "Action": 30,
    "Thriller": 30,
    "Horror": 30,
    "Adventure": 25,
    "War": 25,
    # Medium-high arousal
    "Science Fiction": 20,
    "Mystery": 20,
    "Crime": 20,
    # Medium arousal
    "Fantasy": 15,
    "Comedy": 15,
    "Animation": 10,
    "Music": 10,
    # Low arousal
    "Drama": 5,
    "Documentary": 5,
    "Family": 5,
    "History": 5,
    "Romance": 0,
})

# Keyword arousal modifiers, matched against lowercased keyword names
KEYWORD_MODIFIERS = MappingProxyType({
    # Action-related
    "action": 5,
    "fight": 5,
    "chase": 5,
    "explosion": 5,
    "battle": 5,
    "combat": 5,
    "violence": 5,
    # Intensity-related
    "intense": 5,
    "suspense": 5,
    "tension": 5,
    "thriller": 5,
    "danger": 5,
    "survival": 5,
    "adrenaline": 5,
    # Fast-paced
    "fast-paced": 3,
    "racing": 3,
    "heist": 3,
    "espionage": 3,
    "adventure": 3,
    # Negative modifiers
    "slow-burn": -10,
    "contemplative": -10,
    "quiet": -10,
    "gentle": -10,
})

GENRE_SCORE_CAP = 30
KEYWORD_SCORE_CAP = 40

# (minimum vote_average, bonus), highest threshold first
RATING_BONUS_TIERS = (
    (8.0, 10),
    (7.0, 5),
    (6.0, 3),
)

SHORT_RUNTIME_MINUTES = 100
RUNTIME_BONUS = 5

MIN_SCORE = 0
MAX_SCORE = 100

# (minimum arousal score, spice level), highest threshold first
SPICE_LEVEL_THRESHOLDS = (
    (80, 4),
    (60, 3),
    (40, 2),
    (20, 1),
)

SPICE_LEVEL_NAMES = ("Comfort", "Mild", "Medium", "Hot", "Very Hot")

FOOD_RECOMMENDATIONS = MappingProxyType({
    4: ("Nashville hot chicken", "Sichuan chili chicken", "Korean fire noodles", "Ghost pepper wings"),
    3: ("Buffalo wings", "Spicy tacos", "Thai red curry", "Jerk chicken"),
    2: ("Loaded nachos", "Jalapeño poppers", "Street corn", "Spiced BBQ"),
    1: ("Pasta arrabiata", "Mild curry", "Spiced popcorn", "Soft tacos"),
    0: ("Mac & cheese", "Sushi", "Cheese board", "Pasta primavera"),
})

# Non-alcoholic drinks by heat category
DRINK_PAIRINGS = MappingProxyType({
    "spicy": ("Mango lassi", "Horchata", "Thai iced tea", "Coconut water"),
    "mild": ("Ginger ale", "Iced tea", "Lemonade", "Sparkling water"),
    "comfort": ("Hot cocoa", "Root beer float", "Apple cider", "Milkshake"),
})

RESEARCH_INFO = MappingProxyType({
    "citation": "Byrnes, N. K., & Hayes, J. E. (2015). Food Quality and Preference.",
    "summary": "Sensation-seeking personalities prefer spicy foods ~6× more than low sensation-seekers.",
    "url": "https://pure.psu.edu/en/publications/personality-factors-predict-spicy-food-liking-and-intake",
    "key_findings": (
        "Sensation seeking predicts liking of spicy foods independent of exposure.",
        "Sensitivity to reward is linked to how often chili peppers are eaten.",
        "Personality explains spicy food intake beyond simple taste perception.",
    ),
})

NEUTRAL_SCORE = 50.0
DEFAULT_PROFILE = MappingProxyType({
    "sensation_seeking": NEUTRAL_SCORE,
    "spice_tolerance": NEUTRAL_SCORE,
    "comfort_seeking": NEUTRAL_SCORE,
})

# Spice tolerance runs slightly below sensation seeking
SPICE_TOLERANCE_FACTOR = 0.9

PROFILE_EXPORT_SOURCE = "MovieMatch"

INSIGHT_TEXTS = MappingProxyType({
    "sensation": MappingProxyType({
        "high": "You crave intense, thrilling experiences. Action movies and extreme flavors are your sweet spot.",
        "medium-high": "You enjoy excitement and variety. You appreciate bold movies and spicy food.",
        "medium": "You balance excitement with comfort. You enjoy moderate intensity.",
        "low-medium": "You prefer measured experiences. Subtle flavors and thoughtful films resonate.",
        "low": "You value calm, familiar experiences. Comfort is key in both food and entertainment.",
    }),
    "spice": MappingProxyType({
        "high": "Bring on the heat! Ghost peppers and Nashville hot chicken call your name.",
        "medium-high": "You enjoy a good burn. Thai curry and buffalo wings are perfect.",
        "medium": "You like noticeable spice without overwhelming heat. Jalapeños are your friend.",
        "low-medium": "Gentle warmth suits you. Mild curry and light spices are ideal.",
        "low": "You prefer no heat. Rich, savory flavors without capsaicin burn.",
    }),
})

TRAIT_LABELS = MappingProxyType({
    "sensation_seeking": "Thrill Seeker",
    "spice_tolerance": "Heat Lover",
    "energy_preference": "High Energy",
    "comfort_seeking": "Comfort First",
})

TRAIT_EMOJIS = MappingProxyType({
    "sensation_seeking": "🔥",
    "spice_tolerance": "🌶️",
    "energy_preference": "⚡",
    "comfort_seeking": "😌",
})


def configure_logging(level=None):
    """
    Install a basic log handler for the engine modules.

    Args:
        level: Logging level name or number. Falls back to the
            SENSORY_PAIRING_LOG_LEVEL environment variable, then WARNING.

    Returns:
        The numeric level that was applied.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
    return level
