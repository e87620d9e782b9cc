"""Calculate endpoints wrapping the StringCalculator."""

from __future__ import annotations

from fastapi import APIRouter, Request

from strcalc.models.api import (
    BatchCalculateRequest,
    BatchCalculateResponse,
    CalculateRequest,
    CalculateResponse,
)

router = APIRouter(tags=["calculate"])


@router.post("/calculate", response_model=CalculateResponse)
def calculate(body: CalculateRequest, request: Request) -> CalculateResponse:
    """Reduce a single delimited input string."""
    result = request.app.state.calculator.calculate(body.input)
    return CalculateResponse(input=body.input, result=result)


@router.post("/calculate/batch", response_model=BatchCalculateResponse)
def batch_calculate(body: BatchCalculateRequest, request: Request) -> BatchCalculateResponse:
    """Reduce each input in order; the first rejected input fails the batch."""
    results = request.app.state.calculator.batch_calculate(body.inputs)
    return BatchCalculateResponse(results=results)
