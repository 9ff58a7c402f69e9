import logging

from pydantic import BaseModel, Field, field_validator

DEFAULT_HOME_MESSAGE = "Calculator Application is running! Use /add?a=5&b=3 to test operations."

# 1500! has 4115 digits, under the interpreter's 4300-digit int-to-str limit
FACTORIAL_MAX_INPUT_CAP = 1500


class ServiceRules(BaseModel):
    name: str = "calculator"
    version: str = "0.1.0"
    home_message: str = DEFAULT_HOME_MESSAGE

class FormattingRules(BaseModel):
    decimal_places: int = Field(default=2, ge=0, le=10)

class LimitsRules(BaseModel):
    factorial_max_input: int = Field(default=1000, ge=0, le=FACTORIAL_MAX_INPUT_CAP)

class LoggingRules(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level

class Rules(BaseModel):
    service: ServiceRules = Field(default_factory=ServiceRules)
    formatting: FormattingRules = Field(default_factory=FormattingRules)
    limits: LimitsRules = Field(default_factory=LimitsRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
