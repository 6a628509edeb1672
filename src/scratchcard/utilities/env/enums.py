from enum import StrEnum


class BrushShape(StrEnum):
    ELLIPSE = "ellipse"
    RECTANGLE = "rectangle"
