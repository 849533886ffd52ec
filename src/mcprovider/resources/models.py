"""Pydantic models for managed resources."""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ResourceData(BaseModel):
    """Configuration or state of one resource, as exchanged with the host."""
    kind: str = Field(..., description="Resource kind (preset, job_template, queue)")
    id: str = Field("", description="Remote identifier (the resource name); empty means absent")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Configuration or state tree")

    @property
    def exists(self) -> bool:
        return bool(self.id)
