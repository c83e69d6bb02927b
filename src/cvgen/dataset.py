"""In-memory aggregate of loaded resume data and the user's selections."""

from __future__ import annotations

from dataclasses import dataclass, field

from cvgen.models import Education, Experience, JobTitle, Profile, Project, RawResumeData
from cvgen.selection import ChoiceList, InclusionList

__all__ = ["ResumeDataset"]


@dataclass
class ResumeDataset:
    """Loaded records wrapped in selection lists.

    Attributes:
        profile: Contact details, or ``None`` if none were loaded.
        job_titles: Single-choice list of target roles.
        education: Toggleable education records.
        experience: Toggleable work-experience records.
        projects: Toggleable project records.
        chosen_title: Title picked on the job-title screen, if any.
    """

    profile: Profile | None = None
    job_titles: ChoiceList[JobTitle] = field(default_factory=ChoiceList)
    education: InclusionList[Education] = field(default_factory=InclusionList)
    experience: InclusionList[Experience] = field(default_factory=InclusionList)
    projects: InclusionList[Project] = field(default_factory=InclusionList)
    chosen_title: str | None = None

    @classmethod
    def from_raw(cls, raw: RawResumeData) -> ResumeDataset:
        """Wrap every loaded record with ``included=True`` and no cursor."""
        return cls(
            profile=raw.profile,
            job_titles=ChoiceList(raw.job_titles),
            education=InclusionList(raw.education),
            experience=InclusionList(raw.experience),
            projects=InclusionList(raw.projects),
        )

    def choose_job_title(self) -> bool:
        """Store the highlighted job title as the chosen one.

        Returns:
            ``True`` if a title was highlighted and stored.
        """
        job_title = self.job_titles.choose_current()
        if job_title is None:
            return False
        self.chosen_title = job_title.title
        return True
