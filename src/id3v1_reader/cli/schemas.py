"""Pydantic schemas for JSON output validation.

All --json output from CLI commands uses these models:
- show: ShowResponse | ErrorResponse
- probe: ProbeResponse | ErrorResponse
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "data_error")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "data_error"],
    )
    message: str = Field(description="Human-readable error description")


# ============================================================================
# Show Command Response
# ============================================================================


class TagModel(BaseModel):
    """One extracted tag."""

    tag_type: str = Field(description="Tag format the value came from", examples=["ID3v1", "APEv2"])
    key: str = Field(description="Tag name")
    value: Union[int, str] = Field(description="Tag value (binary values are hex encoded)")


class FileTagsResult(BaseModel):
    """Tags extracted from a single file.

    Attributes:
        path: File that was read
        tags: Tags in emission order
        warnings: Optional soft warnings raised while reading
        error: Error message if the file could not be read
    """

    path: str = Field(description="Path of the file")
    tags: List[TagModel] = Field(default_factory=list)
    warnings: Optional[List[str]] = Field(default=None, description="Soft warnings")
    error: Optional[str] = Field(default=None, description="Read failure, if any")


class ShowResponse(BaseModel):
    status: Literal["success", "completed_with_errors"]
    files: List[FileTagsResult]


# ============================================================================
# Probe Command Response
# ============================================================================


class ProbeResult(BaseModel):
    path: str = Field(description="Path of the file")
    has_id3v1: bool = Field(description="Whether the file ends with an ID3v1 record")


class ProbeResponse(BaseModel):
    status: Literal["success"] = "success"
    files: List[ProbeResult]
    found: int = Field(ge=0, description="Number of files with an ID3v1 record")


ShowCommandResponse = ShowResponse | ErrorResponse
ProbeCommandResponse = ProbeResponse | ErrorResponse
