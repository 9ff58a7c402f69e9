from calculator.rules.loader import load_rules
from calculator.rules.models import Rules

__all__ = ["Rules", "load_rules"]
