"""Document model for text extracted from a source file."""

from typing import Dict
from pydantic import BaseModel, Field


class Document(BaseModel):
    """Extracted document text plus where it came from."""

    content: str = Field(description="Full extracted text content")
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Source information such as file_type and file_path",
    )
