from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """DTO for the JSON error envelope"""
    message: str
