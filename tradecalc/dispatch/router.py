"""FastAPI router for calculation endpoints."""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from tradecalc.exceptions import NotImplementedCalcError

from .registry import describe_function, list_functions, lookup_function
from .service import dispatch_json


router = APIRouter(prefix="/api/calc", tags=["calc"])


@router.post("")
async def calc_endpoint(request: Request) -> JSONResponse:
    """Run a calculation.

    The raw body is decoded here rather than by FastAPI so that malformed
    JSON gets the same error envelope as every other failure.

    Returns:
        JSONResponse with the dispatch status code and body.
    """
    outcome = dispatch_json(await request.body())
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)


@router.get("/functions")
async def list_functions_endpoint() -> dict[str, list[dict[str, Any]]]:
    """List every recognized calculation and its parameters."""
    return {"functions": list_functions()}


@router.get("/functions/{name}")
async def describe_function_endpoint(name: str) -> dict[str, Any]:
    """Describe one calculation.

    Raises:
        NotImplementedCalcError: If the name is not recognized.
    """
    found = lookup_function(name)
    if found is None:
        raise NotImplementedCalcError(name, f"Unknown function: {name}")
    function, _ = found
    return describe_function(function)
