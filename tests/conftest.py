import pytest

from letlang.config.settings import EvaluatorSettings
from letlang.evaluator.environment import create_root_environment
from letlang.evaluator.evaluator import LetEvaluator


@pytest.fixture
def root_env():
    """Provides an empty root environment."""
    return create_root_environment()

@pytest.fixture
def evaluator():
    """Provides an evaluator with default settings."""
    return LetEvaluator()

@pytest.fixture
def strict_evaluator():
    """Provides an evaluator that rejects cdr of an empty list."""
    return LetEvaluator(EvaluatorSettings(strict_cdr=True))
