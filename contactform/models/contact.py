from pydantic import BaseModel, Field


class FormData(BaseModel):
    """Raw contact form payload as posted by the frontend"""
    name: str
    email: str
    message: str


class SubmissionResponse(BaseModel):
    """Stored submission as returned to the caller"""
    id: str = Field(..., description="Identifier generated by the store")
    name: str
    email: str
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
