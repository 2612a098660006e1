"""
RPG combat package.

This package contains the rules engine for two characters exchanging damage
and healing, including fighter archetypes, level-based damage scaling, and the
logging and validation helpers it relies on.
"""
