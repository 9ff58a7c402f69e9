from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from calculator.api.deps import get_rules, get_settings
from calculator.api.main import app
from calculator.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Default rules, independent of the working directory."""
    return Rules()


@pytest.fixture
def client(rules: Rules) -> Iterator[TestClient]:
    """
    Test client with rules injected.
    Lifespan is not run; the startup path has its own tests.
    """
    app.dependency_overrides[get_rules] = lambda: rules
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """Write a rules file and return its path."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "service:\n"
        "  name: calculator\n"
        "  home_message: Test calculator is up\n"
        "formatting:\n"
        "  decimal_places: 3\n"
        "limits:\n"
        "  factorial_max_input: 50\n"
        "logging:\n"
        "  level: debug\n"
    )
    return path


@pytest.fixture
def clear_caches() -> Iterator[None]:
    """Reset cached settings/rules around tests that change the environment."""
    get_settings.cache_clear()
    get_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_rules.cache_clear()
