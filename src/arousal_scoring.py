"""
Arousal scoring for movies from genre, keyword, rating and runtime metadata.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from pairing_config import (
    GENRE_WEIGHTS, KEYWORD_MODIFIERS, GENRE_SCORE_CAP, KEYWORD_SCORE_CAP,
    RATING_BONUS_TIERS, SHORT_RUNTIME_MINUTES, RUNTIME_BONUS, MIN_SCORE, MAX_SCORE
)

logger = logging.getLogger(__name__)


def normalize_name(entry):
    """
    Coerce a genre or keyword entry to a plain name string.

    Args:
        entry: A bare name, a dict with a 'name' key, or an object with a
            'name' attribute (e.g. a TMDB client result)

    Returns:
        Stripped name string, or None when the entry carries no usable name
    """
    if isinstance(entry, str):
        name = entry
    elif isinstance(entry, dict):
        name = entry.get('name', '')
    else:
        name = getattr(entry, 'name', '')

    if not isinstance(name, str):
        return None
    name = name.strip()
    return name or None


def _normalize_names(entries):
    if entries is None:
        return ()
    if isinstance(entries, (str, dict)):
        entries = [entries]
    names = []
    for entry in entries:
        name = normalize_name(entry)
        if name:
            names.append(name)
    return tuple(names)


def _coerce_number(value, field_name, cast=float):
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric %s: %r", field_name, value)
        return None
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite %s: %r", field_name, value)
        return None
    return cast(number)


def _read_field(record, field_name):
    if isinstance(record, dict):
        return record.get(field_name)
    return getattr(record, field_name, None)


@dataclass(frozen=True)
class MovieDescriptor:
    """Normalized, read-only view of a movie metadata record."""

    title: Optional[str] = None
    genres: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    vote_average: Optional[float] = None
    runtime: Optional[int] = None

    @classmethod
    def from_record(cls, record):
        """
        Build a descriptor from a dict, an attribute-bearing object or None.

        Missing or unusable optional values become None or empty tuples.
        A non-iterable genres/keywords value raises TypeError.
        """
        if record is None:
            return cls()
        if isinstance(record, cls):
            return record

        title = _read_field(record, 'title')
        return cls(
            title=title if isinstance(title, str) else None,
            genres=_normalize_names(_read_field(record, 'genres')),
            keywords=_normalize_names(_read_field(record, 'keywords')),
            vote_average=_coerce_number(_read_field(record, 'vote_average'), 'vote_average'),
            runtime=_coerce_number(_read_field(record, 'runtime'), 'runtime', cast=int),
        )


def genre_contribution(genres):
    """Sum genre weights, capped so multi-genre films cannot stack past the cap."""
    total = sum(GENRE_WEIGHTS.get(genre, 0) for genre in genres)
    return min(total, GENRE_SCORE_CAP)


def keyword_contribution(keywords):
    """Sum case-insensitive keyword modifiers, clamped to [0, cap]."""
    total = sum(KEYWORD_MODIFIERS.get(keyword.lower(), 0) for keyword in keywords)
    return max(0, min(total, KEYWORD_SCORE_CAP))


def rating_bonus(vote_average):
    if vote_average is None:
        return 0
    for threshold, bonus in RATING_BONUS_TIERS:
        if vote_average >= threshold:
            return bonus
    return 0


def runtime_bonus(runtime):
    if runtime is not None and runtime < SHORT_RUNTIME_MINUTES:
        return RUNTIME_BONUS
    return 0


def score_breakdown(movie):
    """
    Compute every arousal term for a movie.

    Args:
        movie: Movie record (dict, object, MovieDescriptor or None)

    Returns:
        Dictionary with 'genre', 'keyword', 'rating', 'runtime' terms and
        the clamped integer 'total'
    """
    descriptor = MovieDescriptor.from_record(movie)
    terms = {
        "genre": genre_contribution(descriptor.genres),
        "keyword": keyword_contribution(descriptor.keywords),
        "rating": rating_bonus(descriptor.vote_average),
        "runtime": runtime_bonus(descriptor.runtime),
    }
    raw_total = sum(terms.values())
    # Round half up before clamping
    terms["total"] = int(np.clip(math.floor(raw_total + 0.5), MIN_SCORE, MAX_SCORE))

    logger.debug("Arousal breakdown for %r: %s", descriptor.title, terms)
    return terms


def calculate_arousal_score(movie):
    """
    Calculate the arousal score for a movie.

    Args:
        movie: Movie record with optional genres, keywords, vote_average
            and runtime fields

    Returns:
        Integer arousal score between 0 and 100
    """
    return score_breakdown(movie)["total"]
