"""Response models shared by profile use cases."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from connector.domain.model import Education, Experience, Profile, SocialLinks, User


class ProfileOwnerView(BaseModel):
    """Public face of the profile's owner."""

    id: str
    name: str
    avatar: str | None


class SocialView(BaseModel):
    """Social links."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @classmethod
    def from_domain(cls, social: SocialLinks) -> "SocialView":
        return cls(**social.model_dump())


class ExperienceView(BaseModel):
    """An experience entry. Dates are serialized as ``from`` / ``to``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str | None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Experience) -> "ExperienceView":
        return cls(
            id=str(entry.id),
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationView(BaseModel):
    """An education entry. Dates are serialized as ``from`` / ``to``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    field_of_study: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Education) -> "EducationView":
        return cls(
            id=str(entry.id),
            school=entry.school,
            degree=entry.degree,
            field_of_study=entry.field_of_study,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileView(BaseModel):
    """A profile together with its owner's name and avatar."""

    id: str
    user: ProfileOwnerView
    status: str
    skills: list[str]
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    github_username: str | None
    social: SocialView
    experience: list[ExperienceView]
    education: list[EducationView]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile, owner: User) -> "ProfileView":
        return cls(
            id=str(profile.id),
            user=ProfileOwnerView(id=str(owner.id), name=owner.name, avatar=owner.avatar),
            status=profile.status,
            skills=list(profile.skills),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            github_username=profile.github_username,
            social=SocialView.from_domain(profile.social),
            experience=[ExperienceView.from_domain(e) for e in profile.experience],
            education=[EducationView.from_domain(e) for e in profile.education],
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
