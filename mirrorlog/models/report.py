"""
Conversion report schema (Pydantic model).
"""

from pydantic import BaseModel, Field


class ConversionReport(BaseModel):
    """Summary of one conversion run."""
    source_file: str
    output_file: str
    records_read: int = Field(ge=0)
    records_emitted: int = Field(ge=0)
    duration_s: int = Field(ge=0, description="Whole elapsed seconds of the last record")
    processing_time_s: float = Field(ge=0.0)

    @property
    def records_dropped(self) -> int:
        return self.records_read - self.records_emitted
