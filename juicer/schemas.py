# juicer/schemas.py
"""
Scenario report models.

JSON-serializable Pydantic models describing what happened on each action
of a simulation run. Models are immutable after creation.
"""
from __future__ import annotations

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class ActionRecord(BaseModel):
    """Outcome of a single scenario action."""
    action: int = Field(..., ge=1, description="1-based action number")
    added: Optional[Dict[str, Any]] = Field(default=None, description="Fruit offered on this action")
    add_outcome: Optional[str] = Field(default=None, description="added / rejected, None when no fruit was offered")
    squeeze_outcome: str = Field(..., description="juiced / empty / rotten")
    juice: float = Field(default=0.0, ge=0.0, description="Juice obtained on this action")
    errors: List[str] = Field(default_factory=list, description="Error codes raised during the action")

    model_config = ConfigDict(frozen=True)


class ScenarioReport(BaseModel):
    """Summary of a complete scenario run."""
    actions: List[ActionRecord] = Field(default_factory=list)
    total_juice: float = Field(default=0.0, ge=0.0)
    fruit_added: int = Field(default=0, ge=0)
    fruit_rejected: int = Field(default=0, ge=0)
    rotten_discarded: int = Field(default=0, ge=0)
    juiced_count: int = Field(default=0, ge=0)
    empty_squeezes: int = Field(default=0, ge=0)
    remaining_fruit: int = Field(default=0, ge=0)
    remaining_capacity: float = Field(default=0.0)

    model_config = ConfigDict(frozen=True)
