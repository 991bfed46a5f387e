import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id() -> str:
    """Unique identifier for questions, options and demo responses"""
    return str(uuid.uuid4())


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a person would (2.5 -> 3), not banker's rounding"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage_of(part: float, whole: float) -> float:
    """Percentage of part in whole, 0 when whole is empty"""
    if not whole:
        return 0
    return (part / whole) * 100
