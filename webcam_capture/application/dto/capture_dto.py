from pydantic import BaseModel


class CaptureRunResponse(BaseModel):
    """Body returned after a capture run (aggregate counts only)"""
    success: bool = True
    processed: int
    successful: int


class CaptureErrorResponse(BaseModel):
    """Body returned when a capture run is rejected or fails"""
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    """Operability status of the capture service"""
    status: str = "ok"
    capture_auth: str
    render_provider: str
    storage_backend: str
