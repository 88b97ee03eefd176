"""State containers for the case form and the generated review."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

CAPABILITIES: Tuple[str, ...] = (
    "Fitness to practise",
    "Maintaining an ethical approach",
    "Communicating and consulting",
    "Data gathering and interpretation",
    "Clinical examination and procedural skills",
    "Making a diagnosis",
    "Clinical management",
    "Managing medical complexity",
    "Working with colleagues and in teams",
    "Maintaining performance, learning and teaching",
    "Organisation, management and leadership",
    "Practising holistically and promoting health",
    "Community orientation",
)

MIN_CAPABILITIES = 1
MAX_CAPABILITIES = 3

CAPABILITY_SECTION_PREFIX = "capability:"

# Fixed top-level sections, rendered in this order before any capability.
FIXED_SECTIONS: List[Tuple[str, str]] = [
    ("brief_description", "Brief Description"),
    ("reflection", "Reflection"),
    ("learning_needs", "Learning Needs"),
]


def capability_section_key(name: str) -> str:
    return f"{CAPABILITY_SECTION_PREFIX}{name}"


@dataclass
class CaseInput:
    """What the user typed and picked, as sent to the generation endpoint."""

    description: str = ""
    capabilities: List[str] = field(default_factory=list)


@dataclass
class ReviewContent:
    """Generated review text. Every field may be edited locally after creation."""

    brief_description: str
    reflection: str
    learning_needs: str
    capabilities: Dict[str, str] = field(default_factory=dict)

    def get_section(self, key: str) -> str:
        if key.startswith(CAPABILITY_SECTION_PREFIX):
            return self.capabilities[key[len(CAPABILITY_SECTION_PREFIX):]]
        if key in dict(FIXED_SECTIONS):
            return getattr(self, key)
        raise KeyError(key)

    def set_section(self, key: str, text: str) -> None:
        if key.startswith(CAPABILITY_SECTION_PREFIX):
            name = key[len(CAPABILITY_SECTION_PREFIX):]
            if name not in self.capabilities:
                raise KeyError(key)
            self.capabilities[name] = text
        elif key in dict(FIXED_SECTIONS):
            setattr(self, key, text)
        else:
            raise KeyError(key)

    def sections(self) -> List[Tuple[str, str, str]]:
        """Return (key, label, text) for every section in display order."""
        items = [(key, label, getattr(self, key)) for key, label in FIXED_SECTIONS]
        for name, text in self.capabilities.items():
            items.append((capability_section_key(name), name, text))
        return items

    def as_markdown(self) -> str:
        parts: List[str] = []
        for _, label, text in self.sections():
            parts.append(f"## {label}\n\n{text or '—'}")
        return "\n\n".join(parts)


__all__ = [
    "CAPABILITIES",
    "MIN_CAPABILITIES",
    "MAX_CAPABILITIES",
    "FIXED_SECTIONS",
    "CaseInput",
    "ReviewContent",
    "capability_section_key",
]
