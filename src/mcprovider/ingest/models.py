"""Pydantic models for resource documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ResourceSpec(BaseModel):
    """One declared resource: its kind and desired configuration."""
    kind: str = Field(..., description="Resource kind (preset, job_template, queue)")
    config: Dict[str, Any] = Field(default_factory=dict, description="Desired configuration tree")

    @property
    def name(self) -> str:
        return self.config.get("name") or ""

    @property
    def address(self) -> str:
        return f"{self.kind}.{self.name}"


class ResourceDocument(BaseModel):
    """A set of declared resources loaded from one file."""
    resources: List[ResourceSpec] = Field(default_factory=list, description="Declared resources")
    source: Optional[str] = Field(None, description="Path the document was loaded from")

    def get(self, address: str) -> Optional[ResourceSpec]:
        for spec in self.resources:
            if spec.address == address:
                return spec
        return None

    @property
    def addresses(self) -> List[str]:
        return [spec.address for spec in self.resources]
