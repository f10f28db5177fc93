# No dependencies
from enum import Enum

BYTE_MAX = 255
PERCENT_MAX = 100
HUE_360 = 360


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"
