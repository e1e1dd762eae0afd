"""Dispatch module - request validation and function routing."""

from .schemas import CalcRequest, CalcSuccessResponse, CalcErrorResponse
from .registry import (
    CalcFunction,
    FunctionHandler,
    HANDLERS,
    lookup_function,
    describe_function,
    list_functions,
)
from .service import DispatchOutcome, dispatch, dispatch_json, error_body
from .router import router


__all__ = [
    "CalcRequest",
    "CalcSuccessResponse",
    "CalcErrorResponse",
    "CalcFunction",
    "FunctionHandler",
    "HANDLERS",
    "lookup_function",
    "describe_function",
    "list_functions",
    "DispatchOutcome",
    "dispatch",
    "dispatch_json",
    "error_body",
    "router",
]
