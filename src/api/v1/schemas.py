"""
API Schemas: Pydantic models for request/response validation
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class ImportResponse(BaseModel):
    """Response schema for the statement upload endpoint"""

    success: bool
    message: str
    totalTransactions: int = Field(..., ge=0, description="Transactions parsed from the statement")
    savedTransactions: int = Field(..., ge=0, description="Transactions stored")
    skippedTransactions: int = Field(..., ge=0, description="Duplicates and rows that failed to save")
    totalIncome: Decimal = Field(..., description="Sum of saved INCOME amounts")
    totalExpense: Decimal = Field(..., description="Sum of saved EXPENSE amounts")


class UploadInfoResponse(BaseModel):
    """Upload instructions shown by the client"""

    maxFileSize: str
    supportedFormats: List[str]
    instructions: List[str]


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    service: str
    version: str
    architecture: str
    store_type: str
    store_status: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response schema"""

    detail: str
