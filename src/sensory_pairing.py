"""
Spice-level mapping and food pairing for movies.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from pairing_config import (
    SPICE_LEVEL_THRESHOLDS, SPICE_LEVEL_NAMES, FOOD_RECOMMENDATIONS,
    DRINK_PAIRINGS, RESEARCH_INFO
)
from arousal_scoring import MovieDescriptor, calculate_arousal_score

logger = logging.getLogger(__name__)


TRUE_FLAG_STRINGS = frozenset({"true", "1", "yes", "on"})


def _coerce_flag(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUE_FLAG_STRINGS
    if isinstance(value, int):
        return value == 1
    return False


def _coerce_cuisines(value):
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    try:
        entries = list(value)
    except TypeError:
        logger.debug("Ignoring non-iterable cuisine preferences: %r", value)
        return ()
    return tuple(c for c in entries if isinstance(c, str))


@dataclass(frozen=True)
class PairingOptions:
    """User preferences that shape a pairing."""

    no_spice: bool = False
    cuisine_preferences: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, record):
        """
        Build options from a dict, an existing PairingOptions or None.

        Both snake_case and camelCase keys are accepted. Only True, 1 or a
        'true'/'yes'/'on'/'1' string turns no_spice on; unusable cuisine
        values are ignored.
        """
        if record is None:
            return cls()
        if isinstance(record, cls):
            return record

        no_spice = record.get('no_spice', record.get('noSpice', False))
        cuisines = record.get('cuisine_preferences', record.get('cuisinePreferences'))
        return cls(
            no_spice=_coerce_flag(no_spice),
            cuisine_preferences=_coerce_cuisines(cuisines),
        )


def get_spice_level(arousal_score):
    """
    Map an arousal score onto a spice level.

    Args:
        arousal_score: Arousal score (0-100)

    Returns:
        Integer spice level from 0 (Comfort) to 4 (Very Hot)
    """
    for threshold, level in SPICE_LEVEL_THRESHOLDS:
        if arousal_score >= threshold:
            return level
    return 0


def get_spice_level_name(level):
    if isinstance(level, int) and 0 <= level < len(SPICE_LEVEL_NAMES):
        return SPICE_LEVEL_NAMES[level]
    return "Unknown"


def get_food_recommendations(spice_level, cuisine_preferences=()):
    """
    Get the canonical dish list for a spice level.

    Cuisine preferences are accepted for the presentation layer but the
    list is returned unfiltered.
    """
    return list(FOOD_RECOMMENDATIONS.get(spice_level, ()))


def get_drink_category(spice_level):
    if spice_level >= 2:
        return "spicy"
    if spice_level == 1:
        return "mild"
    return "comfort"


def get_drink_pairings(spice_level):
    """Get non-alcoholic drink suggestions that suit a spice level."""
    return list(DRINK_PAIRINGS[get_drink_category(spice_level)])


def get_sensory_pairing(movie, options=None):
    """
    Get the complete sensory pairing for a movie.

    Args:
        movie: Movie record (dict, object, MovieDescriptor or None)
        options: PairingOptions or dict with no_spice / cuisine_preferences

    Returns:
        Dictionary with 'movie', 'food' and 'research' sections. Keys are
        snake_case (arousal_score, spice_level, spice_name); a JavaScript
        presentation layer expecting arousalScore / spiceLevel / spiceName
        needs a key mapping.
    """
    descriptor = MovieDescriptor.from_record(movie)
    options = PairingOptions.from_record(options)

    arousal_score = calculate_arousal_score(descriptor)
    if options.no_spice:
        spice_level = 0
    else:
        spice_level = get_spice_level(arousal_score)

    logger.debug(
        "Paired %r: arousal=%d spice=%d no_spice=%s",
        descriptor.title, arousal_score, spice_level, options.no_spice
    )

    return {
        "movie": {
            "title": descriptor.title,
            "arousal_score": arousal_score,
            "genres": list(descriptor.genres),
        },
        "food": {
            "spice_level": spice_level,
            "spice_name": get_spice_level_name(spice_level),
            "recommendations": get_food_recommendations(spice_level, options.cuisine_preferences),
        },
        "research": {
            "citation": RESEARCH_INFO["citation"],
            "summary": RESEARCH_INFO["summary"],
        },
    }


def batch_sensory_pairings(movies, options=None):
    """Pair every movie independently, preserving input order."""
    if movies is None:
        return []
    options = PairingOptions.from_record(options)
    return [get_sensory_pairing(movie, options) for movie in movies]
