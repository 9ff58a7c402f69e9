import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from calculator.rules.loader import load_rules
from calculator.rules.models import FormattingRules, LimitsRules, Rules

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("CALC_RULES_PATH", str(self.base_dir / "rules.yaml")))
        # Overrides rules.logging.level when set
        self.log_level = os.environ.get("CALC_LOG_LEVEL")
        origins = os.environ.get("CALC_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


def get_formatting_rules(rules: Rules = Depends(get_rules)) -> FormattingRules:
    return rules.formatting


def get_limits_rules(rules: Rules = Depends(get_rules)) -> LimitsRules:
    return rules.limits
