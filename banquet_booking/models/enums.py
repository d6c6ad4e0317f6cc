from enum import Enum


class ThaliType(str, Enum):
    NORMAL = "Normal"
    SUPREME = "Supreme"
    DELUXE = "Deluxe"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    SUCCESSFUL = "Successful"


class EventTiming(str, Enum):
    MORNING = "Morning"
    EVENING = "Evening"
