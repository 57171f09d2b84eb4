# -*- coding: utf-8 -*-
"""
Project setup entity model.

The first wizard step collects these selections. They decide which later
steps exist (see services.wizard.step_graph).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ProjectType(Enum):
    VILLA = "villa"
    COMMERCIAL = "commercial"
    MAINTENANCE = "maintenance"
    GOVERNMENTAL = "governmental"
    FITOUT = "fitout"


class VillaCategory(Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class ContractType(Enum):
    NEW = "new"
    CONTINUE = "continue"


class ContractClassification(Enum):
    """Contract funding category. NONE means not chosen yet."""
    HOUSING_LOAN_PROGRAM = "housing_loan_program"
    PRIVATE_FUNDING = "private_funding"
    NONE = ""

    @classmethod
    def parse(cls, value: Any) -> "ContractClassification":
        if isinstance(value, cls):
            return value
        try:
            return cls(value or "")
        except ValueError:
            return cls.NONE


def _parse_enum(enum_cls, value):
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


@dataclass
class ProjectSetup:
    """
    Setup selections of a project.

    villa_category is meaningful only when project_type is VILLA.
    """

    project_type: Optional[ProjectType] = None
    villa_category: Optional[VillaCategory] = None
    contract_type: Optional[ContractType] = None
    internal_code: str = ""
    contract_classification: ContractClassification = ContractClassification.NONE

    @property
    def is_villa(self) -> bool:
        return self.project_type == ProjectType.VILLA

    @property
    def is_housing_loan(self) -> bool:
        return self.contract_classification == ContractClassification.HOUSING_LOAN_PROGRAM

    def with_changes(self, **changes) -> "ProjectSetup":
        """Return a copy with the given fields replaced (string values are parsed)."""
        data = self.to_dict()
        key_map = {
            "project_type": "projectType",
            "villa_category": "villaCategory",
            "contract_type": "contractType",
            "internal_code": "internalCode",
            "contract_classification": "contractClassification",
        }
        for key, value in changes.items():
            if key not in key_map:
                raise AttributeError(f"ProjectSetup has no field {key!r}")
            data[key_map[key]] = value.value if isinstance(value, Enum) else value
        updated = ProjectSetup.from_dict(data)
        # Switching away from villa drops the category
        if not updated.is_villa:
            updated.villa_category = None
        return updated

    def to_dict(self) -> Dict[str, Any]:
        """Serialize in the shape kept by the local draft store."""
        return {
            "projectType": self.project_type.value if self.project_type else "",
            "villaCategory": self.villa_category.value if self.villa_category else "",
            "contractType": self.contract_type.value if self.contract_type else "",
            "internalCode": self.internal_code or "",
            "contractClassification": self.contract_classification.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectSetup":
        """Restore from the draft-store shape. Unknown values become None."""
        data = data or {}
        return cls(
            project_type=_parse_enum(ProjectType, data.get("projectType")),
            villa_category=_parse_enum(VillaCategory, data.get("villaCategory")),
            contract_type=_parse_enum(ContractType, data.get("contractType")),
            internal_code=data.get("internalCode") or "",
            contract_classification=ContractClassification.parse(
                data.get("contractClassification")
            ),
        )

    @classmethod
    def from_api(cls, project: Dict[str, Any],
                 contract_classification: Any = None) -> "ProjectSetup":
        """Build from a `projects/{id}/` record (snake_case keys)."""
        project = project or {}
        return cls(
            project_type=_parse_enum(ProjectType, project.get("project_type")),
            villa_category=_parse_enum(VillaCategory, project.get("villa_category")),
            contract_type=_parse_enum(ContractType, project.get("contract_type")),
            internal_code=project.get("internal_code") or "",
            contract_classification=ContractClassification.parse(contract_classification),
        )

    def to_project_payload(self) -> Dict[str, Any]:
        """Body for POST/PATCH `projects/`."""
        return {
            "project_type": self.project_type.value if self.project_type else None,
            "villa_category": (
                self.villa_category.value
                if self.is_villa and self.villa_category else None
            ),
            "contract_type": self.contract_type.value if self.contract_type else None,
            "internal_code": self.internal_code or "",
        }
