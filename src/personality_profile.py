"""
Personality profiling from a user's movie history.

Sensation seeking and spice tolerance are estimated from the average arousal
of the movies a user watches; comfort seeking is its complement.
"""

import logging
import math
from datetime import datetime, timezone

import numpy as np

from pairing_config import (
    DEFAULT_PROFILE, NEUTRAL_SCORE, SPICE_TOLERANCE_FACTOR, PROFILE_EXPORT_SOURCE,
    MIN_SCORE, MAX_SCORE, INSIGHT_TEXTS, TRAIT_LABELS, TRAIT_EMOJIS
)
from arousal_scoring import calculate_arousal_score

logger = logging.getLogger(__name__)


def _clamp_score(value):
    return float(np.clip(value, MIN_SCORE, MAX_SCORE))


def _coerce_energy(music_energy):
    if isinstance(music_energy, bool):
        return None
    try:
        energy = float(music_energy)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric music_energy: %r", music_energy)
        return None
    if not math.isfinite(energy):
        logger.debug("Ignoring non-finite music_energy: %r", music_energy)
        return None
    return float(np.clip(energy, 0.0, 1.0))


def _blend_energy(value, music_energy):
    return _clamp_score((value + music_energy * 100) / 2)


def calculate_personality_profile(movies, music_energy=None):
    """
    Calculate a personality profile from a movie history.

    Args:
        movies: Iterable of movie records, or None
        music_energy: Optional external music energy signal between 0 and 1.
            When given, an 'energy_preference' dimension is added and both it
            and 'sensation_seeking' are blended with the signal. Non-numeric
            or non-finite values are treated as not supplied.

    Returns:
        Dictionary of snake_case dimension name (sensation_seeking, ...) to
        score between 0 and 100; JavaScript callers map these to camelCase
    """
    movies = list(movies) if movies is not None else []

    if not movies:
        profile = dict(DEFAULT_PROFILE)
        avg_arousal = NEUTRAL_SCORE
    else:
        avg_arousal = float(np.mean([calculate_arousal_score(movie) for movie in movies]))
        profile = {
            "sensation_seeking": _clamp_score(avg_arousal),
            "spice_tolerance": _clamp_score(avg_arousal * SPICE_TOLERANCE_FACTOR),
            "comfort_seeking": _clamp_score(MAX_SCORE - avg_arousal),
        }

    energy = _coerce_energy(music_energy) if music_energy is not None else None
    if energy is not None:
        profile["energy_preference"] = _blend_energy(avg_arousal, energy)
        profile["sensation_seeking"] = _blend_energy(profile["sensation_seeking"], energy)

    logger.debug("Profile from %d movies: %s", len(movies), profile)
    return profile


def _score_tier(score):
    if score >= 80:
        return "high"
    elif score >= 60:
        return "medium-high"
    elif score >= 40:
        return "medium"
    elif score >= 20:
        return "low-medium"
    else:
        return "low"


def get_insight_text(dimension, score):
    """
    Describe a profile score in plain language.

    Args:
        dimension: 'sensation' or 'spice'
        score: Profile score (0-100)

    Returns:
        Insight sentence, or an empty string for an unknown dimension
    """
    return INSIGHT_TEXTS.get(dimension, {}).get(_score_tier(score), "")


def get_primary_trait(profile):
    """Return the dimension with the highest score; the first one wins ties."""
    primary, best = None, None
    for trait, score in profile.items():
        if best is None or score > best:
            primary, best = trait, score
    return primary


def export_profile_data(movies, music_energy=None, now=None):
    """
    Package a profile with provenance metadata for external integrations.

    Args:
        movies: Movie history
        music_energy: Optional external music energy signal (0-1)
        now: Timestamp override, defaults to the current UTC time

    Returns:
        Dictionary with source, timestamp, profile and metadata
    """
    movies = list(movies) if movies is not None else []
    if now is None:
        now = datetime.now(timezone.utc)

    return {
        "source": PROFILE_EXPORT_SOURCE,
        "timestamp": now.isoformat(),
        "profile": calculate_personality_profile(movies, music_energy),
        "metadata": {
            "movie_count": len(movies),
        },
    }
