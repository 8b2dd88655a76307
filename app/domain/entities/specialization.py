from dataclasses import dataclass


@dataclass(frozen=True)
class Specialization:
    id: str
    name: str
    description: str
    icon: str
