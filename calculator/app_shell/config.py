import logging

from pydantic import ValidationError

from calculator.components.arithmetic import OPERATIONS
from calculator.components.formatting import PREDICATE_TEMPLATES, RESULT_TEMPLATES
from calculator.rules.models import LoggingRules, Rules

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """
    Configure root logging once for the process.
    Later calls only adjust the level.
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def resolve_log_level(override: str | None, rules: Rules) -> str:
    """
    Pick the effective log level: the override when given, else the rules'.
    Raises ValueError if the override is not a known level name.
    """
    if override is None:
        return rules.logging.level
    try:
        return LoggingRules(level=override).level
    except ValidationError as e:
        raise ValueError(f"Unknown logging level override: {override}") from e


def validate_startup_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    Raises ValueError on the first problem found.
    """
    # 1. Every operation must be renderable
    missing = [
        op for op in OPERATIONS if op not in RESULT_TEMPLATES and op not in PREDICATE_TEMPLATES
    ]
    if missing:
        raise ValueError(f"No response template for operations: {', '.join(missing)}")

    # 2. Home message is served verbatim at /
    if not rules.service.home_message.strip():
        raise ValueError("service.home_message must not be empty")

    logger.info(
        "Configuration validated (decimal_places=%d, factorial_max_input=%d)",
        rules.formatting.decimal_places,
        rules.limits.factorial_max_input,
    )
