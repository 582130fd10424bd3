"""
Evaluator settings model.
"""
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("1", "true", "yes", "on")


class EvaluatorSettings(BaseModel):
    """
    Behaviour switches for LetEvaluator.
    """
    strict_cdr: bool = Field(False, description="Raise EmptyListAccess for cdr of an empty list instead of returning an empty list.")
    log_level: str = Field("INFO", description=f"Logging level name, one of {list(LOG_LEVELS)}.")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}, got '{value}'")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'EvaluatorSettings':
        """Build settings from LET_STRICT_CDR and LET_LOG_LEVEL, defaulting to os.environ."""
        environ = os.environ if environ is None else environ
        values = {}
        strict_cdr_env_val = environ.get('LET_STRICT_CDR')
        if strict_cdr_env_val is not None:
            values['strict_cdr'] = strict_cdr_env_val.strip().lower() in TRUE_VALUES
        log_level_env_val = environ.get('LET_LOG_LEVEL')
        if log_level_env_val:
            values['log_level'] = log_level_env_val.strip()
        logger.debug("Settings from environment: %s", values)
        return cls(**values)
