# -*- coding: utf-8 -*-
"""
Persistence state of the project being edited.

A new project lives only in the wizard (Unsaved) until the site plan is
finished; from then on every step talks to the server (Persisted).
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Unsaved:
    @property
    def project_id(self) -> Optional[Any]:
        return None

    @property
    def is_persisted(self) -> bool:
        return False


@dataclass(frozen=True)
class Persisted:
    project_id: Any

    def __post_init__(self):
        if self.project_id in (None, ""):
            raise ValueError("Persisted draft state needs a project id")

    @property
    def is_persisted(self) -> bool:
        return True


DraftState = Union[Unsaved, Persisted]
