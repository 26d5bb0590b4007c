"""Driver settings for the `lox` command.

Only the driver reads these; the scanner, parser and evaluator take
everything they need as arguments.
"""

from __future__ import annotations
import logging
from pydantic import BaseModel, ConfigDict, Field, field_validator
from constants import DEFAULT_MAX_SOURCE_SIZE, DEFAULT_RECURSION_LIMIT

class DriverConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_source_size: int = Field(
        default=DEFAULT_MAX_SOURCE_SIZE,
        gt=0,
        description="Largest source file accepted, in bytes",
    )
    recursion_limit: int = Field(
        default=DEFAULT_RECURSION_LIMIT,
        gt=0,
        description="Python recursion limit set by the driver",
    )
    prompt: str = Field(default="> ", description="Interactive prompt")
    log_level: str = Field(default="WARNING", description="Root log level")
    show_tree: bool = Field(
        default=False, description="Print the parsed tree before the value"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
