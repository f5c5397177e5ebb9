"""
Sensory Pairing Engine - Source Package

This package contains the core functionality for movie-to-food sensory pairing:
- pairing_config: Lookup tables, research info and logging configuration
- arousal_scoring: Movie normalization and arousal score calculation
- sensory_pairing: Spice levels, food/drink pairings and batch pairing
- personality_profile: Personality profiles and profile insights
- pairing_report: Tabular pairing summaries
"""
