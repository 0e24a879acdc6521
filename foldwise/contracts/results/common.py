from __future__ import annotations

"""Result contracts.

These models represent *outputs* produced by the evaluator and are handed to
reporting/plotting code.

Design goals:
- JSON-friendly field types (lists, dicts, scalars) at the contract boundary.
- Strict validation (extra fields forbidden) to prevent silent drift.
- Immutable once constructed.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict and frozen)."""

    model_config = ConfigDict(extra="forbid", frozen=True)


JSONDict = Dict[str, Any]
