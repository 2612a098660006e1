from .damage import DamageOutcome, SelfTargetError, apply_damage, scale_damage

__all__ = [
    "DamageOutcome",
    "SelfTargetError",
    "apply_damage",
    "scale_damage",
]
