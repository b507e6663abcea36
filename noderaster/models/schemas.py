"""
Pydantic Models and Schemas
===========================

Data models for host nodes, paints, export settings and in-memory blobs.
Host objects that are not built from these models are still accepted by the
core as long as they expose the same attributes.
"""

from typing import Optional, List, Dict, Any, Union, Literal
from enum import Enum
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Enums
class PaintType(str, Enum):
    """Paint (fill) kinds known to the design host."""
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    PATTERN = "PATTERN"


class ExportFormat(str, Enum):
    """Raster formats produced by the export pipeline."""
    PNG = "PNG"


class ConstraintType(str, Enum):
    """Scaling strategies understood by the host export primitive."""
    SCALE = "SCALE"
    WIDTH = "WIDTH"
    HEIGHT = "HEIGHT"


# Marker the host uses when a node mixes several fill lists
MIXED_FILLS = "MIXED"


# Paint Models
class Paint(BaseModel):
    """A single rendering instruction attached to a node."""
    type: PaintType = Field(..., description="Paint discriminant")
    visible: bool = Field(True, description="Whether the paint is drawn")
    opacity: float = Field(1.0, ge=0.0, le=1.0)
    color: Optional[Dict[str, float]] = Field(None, description="RGB(A) color for solid paints")
    image_hash: Optional[str] = Field(None, alias="imageHash")
    scale_mode: Optional[str] = Field(None, alias="scaleMode")

    model_config = ConfigDict(populate_by_name=True)


# Export Models
class ExportConstraint(BaseModel):
    """Scaling constraint for an export."""
    type: ConstraintType = ConstraintType.SCALE
    value: float = Field(1.0, gt=0)


class ExportSettings(BaseModel):
    """Settings handed to the host export primitive."""
    format: ExportFormat = ExportFormat.PNG
    constraint: ExportConstraint = Field(default_factory=ExportConstraint)

    model_config = ConfigDict(frozen=True)


# Node Models
class SceneNode(BaseModel):
    """In-process node handle.

    ``children`` is ``None`` for nodes that cannot hold children, and ``fills``
    is ``None`` for nodes without a fill concept.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    visible: bool = True
    fills: Optional[Union[List[Paint], Literal["MIXED"]]] = None
    children: Optional[List["SceneNode"]] = None


class PlaceholderDimensions(BaseModel):
    """Placeholder size; height defaults to width."""
    width: int = Field(..., ge=0)
    height: Optional[int] = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def truncate(cls, v: Any) -> Any:
        """Truncate numeric sizes to non-negative integers."""
        if v is None:
            return v
        return max(0, int(v))

    @property
    def resolved_height(self) -> int:
        """Height to render, falling back to the width for square images."""
        return self.width if self.height is None else self.height

    @classmethod
    def from_size(cls, width: float, height: Optional[float] = None) -> "PlaceholderDimensions":
        """Build dimensions, treating a negative height as absent."""
        if height is not None and height < 0:
            height = None
        return cls(width=width, height=height)


# Blob Models
class Blob(BaseModel):
    """Immutable in-memory binary payload with a media type."""
    data: bytes
    type: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        return len(self.data)


SceneNode.model_rebuild()
