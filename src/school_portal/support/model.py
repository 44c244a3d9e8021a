from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional


@dataclass(frozen=True)
class SupportRequest:
    """Contact form as submitted by the website; field names match the form inputs."""

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    input_radio: Optional[str] = None
    input_radio_1: Optional[str] = None
    input_radio_2: Optional[str] = None
    input_text: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_form(cls, data: dict) -> "SupportRequest":
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})

    def as_row(self) -> List[Optional[str]]:
        return [getattr(self, f.name) for f in fields(self)]

    def as_text(self) -> str:
        return "\n".join(
            [
                f"First Name: {self.first_name}",
                f"Middle Name: {self.middle_name}",
                f"Last Name: {self.last_name}",
                f"Email: {self.email}",
                f"Department: {self.department}",
                f"Input Radio: {self.input_radio}",
                f"Input Radio 1: {self.input_radio_1}",
                f"Input Radio 2: {self.input_radio_2}",
                f"Input Text: {self.input_text}",
                f"Description: {self.description}",
            ]
        )
