"""Data contracts for the design tree and the generation pipeline.

Design-side models (DesignNode, GlobalVars, SimplifiedDesign) are pydantic
models because they arrive as JSON from the Figma simplifier or the API.
Pipeline-side results (ComponentMapping, GeneratedNcdsHtml) are plain
dataclasses created fresh per node / per run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Design tree ---


class NodeType(str, Enum):
    TEXT = "TEXT"
    FRAME = "FRAME"
    GROUP = "GROUP"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    IMAGE = "IMAGE"
    INSTANCE = "INSTANCE"
    COMPONENT = "COMPONENT"
    LINE = "LINE"
    OTHER = "OTHER"


class LayoutBox(BaseModel):
    """Bounding box of a node (absolute coordinates)."""

    model_config = ConfigDict(frozen=True)

    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class DesignNode(BaseModel):
    """One node of the simplified design tree. Read-only."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    name: str = ""
    type: NodeType = NodeType.OTHER
    text: Optional[str] = None
    layout: Optional[LayoutBox] = None
    opacity: Optional[float] = None
    border_radius: Optional[Union[float, str]] = Field(None, alias="borderRadius")
    children: Optional[List["DesignNode"]] = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> Any:
        if isinstance(v, NodeType):
            return v
        try:
            return NodeType(str(v).upper())
        except ValueError:
            return NodeType.OTHER

    @field_validator("name", "id", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("children", mode="after")
    @classmethod
    def _empty_children_to_none(cls, v: Optional[List["DesignNode"]]) -> Optional[List["DesignNode"]]:
        return v or None


class GlobalVars(BaseModel):
    """Shared style/variable definitions referenced by nodes. Passed through."""

    styles: Dict[str, Any] = Field(default_factory=dict)


class SimplifiedDesign(BaseModel):
    """A simplified design file: top-level nodes plus the global variable table."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    nodes: List[DesignNode] = Field(default_factory=list)
    global_vars: GlobalVars = Field(default_factory=GlobalVars, alias="globalVars")


# --- Classification / generation results ---


class ComponentKind(str, Enum):
    BUTTON = "Button"
    INPUT_BASE = "InputBase"
    CHECKBOX = "Checkbox"
    RADIO = "Radio"
    SELECT = "Select"
    BADGE = "Badge"
    MODAL = "Modal"
    HORIZONTAL_TAB = "HorizontalTab"
    VERTICAL_TAB = "VerticalTab"
    PAGINATION = "Pagination"
    PROGRESS_BAR = "ProgressBar"
    PROGRESS_CIRCLE = "ProgressCircle"
    NOTIFICATION = "Notification"
    SPINNER = "Spinner"
    TAG = "Tag"
    TOOLTIP = "Tooltip"
    SLIDER = "Slider"
    TOGGLE = "Toggle"
    BREADCRUMB = "BreadCrumb"
    DIVIDER = "Divider"
    DROPDOWN = "Dropdown"
    EMPTY_STATE = "EmptyState"
    FEATURED_ICON = "FeaturedIcon"


@dataclass
class ComponentMapping:
    """Rule engine output for a single node."""
    component: str  # ComponentKind value; checked by the validator
    props: Dict[str, Any]
    html_tag: str
    class_name: str  # Base NCDS class, e.g. "ncua-btn"
    children: Optional[List["ComponentMapping"]] = None


@dataclass
class GeneratedNcdsHtml:
    """Result of one generate_from_design() run."""
    html: str
    css: Optional[str] = None
    imports: Optional[List[str]] = None  # Distinct kinds, first-use order
    component_usage: Dict[str, int] = field(default_factory=dict)


DesignNode.model_rebuild()
