"""Profile aggregate root.

Each user has at most one profile. Experience and education entries live
inside it, newest first, and are authorized through the profile owner.
"""

from datetime import date, datetime

from pydantic import Field

from connector.domain.model.common import DomainModel, utcnow
from connector.domain.value import EducationId, ExperienceId, ProfileId, UserId


class SocialLinks(DomainModel):
    """Links to the owner's social accounts."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class Experience(DomainModel):
    """A position held, shown on the profile."""

    id: ExperienceId
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class Education(DomainModel):
    """A course of study, shown on the profile."""

    id: EducationId
    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field_of_study: str = Field(min_length=1)
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class ProfileDetails(DomainModel):
    """Editable scalar fields of a profile.

    ``None`` means "leave unchanged" when updating an existing profile.
    Social links are always replaced as a whole.
    """

    status: str = Field(min_length=1)
    skills: list[str] = Field(min_length=1)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    user_id: UserId
    status: str = Field(min_length=1)
    skills: list[str] = Field(default_factory=list)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def find_experience(self, experience_id: ExperienceId) -> Experience | None:
        return next((e for e in self.experience if e.id == experience_id), None)

    def find_education(self, education_id: EducationId) -> Education | None:
        return next((e for e in self.education if e.id == education_id), None)
