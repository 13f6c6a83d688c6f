from enum import StrEnum


class AddOnKind(StrEnum):
    """Optional per-ticket extras; surcharges come from settings"""

    POPCORN = 'popcorn'
    SODA = 'soda'

    @property
    def label(self) -> str:
        return self.value.capitalize()
