"""
Tabular summaries of sensory pairings for dashboards and exports.
"""

import pandas as pd

from pairing_config import SPICE_LEVEL_NAMES
from sensory_pairing import batch_sensory_pairings

PAIRING_COLUMNS = ["title", "arousal_score", "spice_level", "spice_name", "recommendations"]


def build_pairing_frame(movies, options=None):
    """
    Build a one-row-per-movie table of pairings.

    Args:
        movies: Iterable of movie records
        options: Pairing options applied to every movie

    Returns:
        DataFrame with PAIRING_COLUMNS, rows in input order
    """
    rows = []
    for pairing in batch_sensory_pairings(movies, options):
        rows.append([
            pairing["movie"]["title"],
            pairing["movie"]["arousal_score"],
            pairing["food"]["spice_level"],
            pairing["food"]["spice_name"],
            pairing["food"]["recommendations"],
        ])
    return pd.DataFrame(rows, columns=PAIRING_COLUMNS)


def spice_level_distribution(frame):
    """Count pairings per spice name, in spice order, including empty levels."""
    counts = frame["spice_name"].value_counts()
    return counts.reindex(list(SPICE_LEVEL_NAMES), fill_value=0).astype(int)
