from .geometry import Point2D, Line, Circle, Cross, OrdinateDimension, pt
from .joint import (
    Section, Bolt, FlangeBolt, Gauge, OuterPlate, InnerPlate, Flange,
    WebBolt, WebPlate, Web, LayerNames, JointSpec,
)
from .drawing import PrimitiveType, DrawingStats, ViewSummary, DrawingSummary
from .parameters import DraftingParams
from .context import DrawingContext

__all__ = [
    "Point2D", "Line", "Circle", "Cross", "OrdinateDimension", "pt",
    "Section", "Bolt", "FlangeBolt", "Gauge", "OuterPlate", "InnerPlate",
    "Flange", "WebBolt", "WebPlate", "Web", "LayerNames", "JointSpec",
    "PrimitiveType", "DrawingStats", "ViewSummary", "DrawingSummary",
    "DraftingParams",
    "DrawingContext",
]
