"""Request and response models for the HTTP wrapper."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CalculateRequest(BaseModel):
    input: Optional[str] = None


class CalculateResponse(BaseModel):
    input: Optional[str] = None
    result: int


class BatchCalculateRequest(BaseModel):
    inputs: list[str] = Field(default_factory=list)


class BatchCalculateResponse(BaseModel):
    results: list[int] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned for rejected inputs."""

    error: Literal["format_error", "validation_error"]
    detail: str
