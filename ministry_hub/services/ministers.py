"""Minister writes: the profile row and its list sections in one commit."""

from typing import Any

from ministry_hub.models import (
    Minister,
    MinisterAward,
    MinisterCaseReport,
    MinisterChild,
    MinisterEducationBackground,
    MinisterEmergencyContact,
    MinisterEmploymentRecord,
    MinisterMinistryExperience,
    MinisterMinistryRecord,
    MinisterMinistrySkill,
    MinisterSeminar,
)
from ministry_hub.services.crud import CrudService, utcnow

# Minister relationship name -> row model of that section.
PROFILE_SECTION_MODELS: dict[str, type] = {
    "children": MinisterChild,
    "emergency_contacts": MinisterEmergencyContact,
    "education_backgrounds": MinisterEducationBackground,
    "ministry_experiences": MinisterMinistryExperience,
    "ministry_skills": MinisterMinistrySkill,
    "ministry_records": MinisterMinistryRecord,
    "awards_recognitions": MinisterAward,
    "employment_records": MinisterEmploymentRecord,
    "seminars_conferences": MinisterSeminar,
    "case_reports": MinisterCaseReport,
}


class MinisterService(CrudService[Minister]):
    """
    CrudService for ministers whose writes may carry profile sections.

    A section present in the values replaces the stored list (old rows are
    deleted as orphans); an absent section is left as it is. Deleting a
    minister deletes every section row with it.
    """

    def _apply(self, row: Minister, values: dict[str, Any]) -> None:
        values = dict(values)
        now = utcnow()
        for section, model in PROFILE_SECTION_MODELS.items():
            if section not in values:
                continue
            entries = values.pop(section)
            setattr(row, section, [model(**entry, created_at=now, updated_at=now) for entry in entries])
        super()._apply(row, values)
