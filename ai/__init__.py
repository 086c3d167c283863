"""医生行动策略"""

from .strategy import ACTION_ORDER, DoctorStrategy, FixedStrategy, RandomStrategy

__all__ = ["ACTION_ORDER", "DoctorStrategy", "FixedStrategy", "RandomStrategy"]
