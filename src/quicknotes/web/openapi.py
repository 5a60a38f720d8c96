from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"success": False, "error": '"title" is required'},
                {"success": False, "error": '"notes" must contain at least 1 items'},
            ]
        }
    }
