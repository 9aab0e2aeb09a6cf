"""Cliente y resultados del servicio de timbrado de CFDI."""

from .client import StampClient
from .results import (
    CancelCfdiResult,
    CancelCfdiResultV2,
    CancelCfdiResultV3,
    CancelResult,
    CreateCfdiResult,
    CreatePdfResult,
    FetchCfdiResult,
    StatusCfdiResult,
    cancel_result_for,
)

__all__ = [
    "CancelCfdiResult",
    "CancelCfdiResultV2",
    "CancelCfdiResultV3",
    "CancelResult",
    "CreateCfdiResult",
    "CreatePdfResult",
    "FetchCfdiResult",
    "StampClient",
    "StatusCfdiResult",
    "cancel_result_for",
]
