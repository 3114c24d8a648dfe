"""
Vacation type choices shown before adding a destination
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class VacationType(str, Enum):
    TROPICAL = "tropical"
    MOUNTAIN = "mountain"
    CULTURAL = "cultural"


@dataclass(frozen=True)
class VacationChoice:
    """A selectable vacation card"""
    type: VacationType
    icon: str
    title: str
    description: str


VACATION_TYPES: List[VacationChoice] = [
    VacationChoice(VacationType.TROPICAL, "🌴", "Tropical Paradise", "Beaches, sun, and relaxation"),
    VacationChoice(VacationType.MOUNTAIN, "🏔️", "Mountain Adventure", "Hiking, skiing, and fresh air"),
    VacationChoice(VacationType.CULTURAL, "🏛️", "Cultural Experience", "Museums, history, and local cuisine"),
]

DEFAULT_EMOJI = "✈️"


def vacation_emoji(vacation_type: Optional[str]) -> str:
    """Icon for a stored vacation type, falling back to a plane"""
    for choice in VACATION_TYPES:
        if choice.type.value == vacation_type:
            return choice.icon
    return DEFAULT_EMOJI
