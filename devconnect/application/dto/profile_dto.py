"""
Profile DTO
===========

Pydantic models for profile API requests and responses.
Field names match the JSON the web frontend sends and expects.
"""
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from devconnect.utils.datetime_utils import to_datetime


def _required(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise PydanticCustomError("required", message)
    return str(value).strip()


def _with_from_key(data: Any) -> Any:
    # An explicit None reaches the "from" validator and is reported under "from"
    if isinstance(data, dict) and "from" not in data and "from_date" not in data:
        data = {**data, "from": None}
    return data


class ProfileUpsertRequest(BaseModel):
    """DTO for creating/updating the caller's profile."""
    status: Optional[str] = Field(None, validate_default=True, description="Professional status, e.g. 'Developer'")
    skills: Optional[Union[List[str], str]] = Field(
        None,
        validate_default=True,
        description="List of skills, or a comma-separated string",
    )
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    usegithubavatar: bool = False
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": "Developer",
                "skills": "Python, FastAPI, MongoDB",
                "company": "Acme",
                "website": "acme.dev",
                "githubusername": "octocat",
                "usegithubavatar": False,
                "twitter": "twitter.com/octocat",
            }
        }

    @field_validator("status")
    @classmethod
    def _status_required(cls, value: Optional[str]) -> str:
        return _required(value, "Status is required")

    @field_validator("skills")
    @classmethod
    def _split_skills(cls, value: Optional[Union[List[str], str]]) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        skills = [skill.strip() for skill in value or [] if skill and skill.strip()]
        if not skills:
            raise PydanticCustomError("required", "Skills is required")
        return skills


class ExperienceCreateRequest(BaseModel):
    """DTO for adding an experience entry."""
    title: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = Field(None, validate_default=True)
    location: Optional[str] = None
    from_date: Optional[datetime] = Field(None, alias="from")
    to_date: Optional[datetime] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Backend Engineer",
                "company": "Acme",
                "location": "Berlin",
                "from": "2021-03-01",
                "to": "2023-06-30",
                "current": False,
                "description": "Built the payments API",
            }
        }

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: Optional[str]) -> str:
        return _required(value, "Title is required")

    @field_validator("company")
    @classmethod
    def _company_required(cls, value: Optional[str]) -> str:
        return _required(value, "Company is required")

    @model_validator(mode="before")
    @classmethod
    def _require_from_key(cls, data: Any) -> Any:
        return _with_from_key(data)

    @field_validator("from_date")
    @classmethod
    def _from_required(cls, value: Optional[datetime]) -> datetime:
        if value is None:
            raise PydanticCustomError("required", "From date is required")
        return to_datetime(value)

    @field_validator("to_date")
    @classmethod
    def _to_after_from(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_to_date(value, info)


class EducationCreateRequest(BaseModel):
    """DTO for adding an education entry."""
    school: Optional[str] = Field(None, validate_default=True)
    degree: Optional[str] = Field(None, validate_default=True)
    fieldofstudy: Optional[str] = Field(None, validate_default=True)
    from_date: Optional[datetime] = Field(None, alias="from")
    to_date: Optional[datetime] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "school": "TU Berlin",
                "degree": "BSc",
                "fieldofstudy": "Computer Science",
                "from": "2016-10-01",
                "to": "2020-09-30",
            }
        }

    @field_validator("school")
    @classmethod
    def _school_required(cls, value: Optional[str]) -> str:
        return _required(value, "School is required")

    @field_validator("degree")
    @classmethod
    def _degree_required(cls, value: Optional[str]) -> str:
        return _required(value, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def _field_required(cls, value: Optional[str]) -> str:
        return _required(value, "Field of study is required")

    @model_validator(mode="before")
    @classmethod
    def _require_from_key(cls, data: Any) -> Any:
        return _with_from_key(data)

    @field_validator("from_date")
    @classmethod
    def _from_required(cls, value: Optional[datetime]) -> datetime:
        if value is None:
            raise PydanticCustomError("required", "From date is required")
        return to_datetime(value)

    @field_validator("to_date")
    @classmethod
    def _to_after_from(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_to_date(value, info)


def _check_to_date(value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
    if value is None:
        return None
    value = to_datetime(value)
    from_date = info.data.get("from_date")
    # from_date is absent from info.data when it failed its own validation
    if from_date is not None and not from_date < value:
        raise PydanticCustomError("date_order", "From date must be before the to date")
    return value


class UserSummaryResponse(BaseModel):
    """The owner fields attached to a profile."""
    id: str = Field(..., alias="_id")
    name: Optional[str] = None
    avatar: Optional[str] = None

    class Config:
        populate_by_name = True


class SocialResponse(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None


class ExperienceResponse(BaseModel):
    """DTO for an experience entry."""
    id: str = Field(..., alias="_id")
    title: str
    company: str
    location: Optional[str] = None
    from_date: datetime = Field(..., alias="from")
    to_date: Optional[datetime] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class EducationResponse(BaseModel):
    """DTO for an education entry."""
    id: str = Field(..., alias="_id")
    school: str
    degree: str
    fieldofstudy: str
    from_date: datetime = Field(..., alias="from")
    to_date: Optional[datetime] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class ProfileResponse(BaseModel):
    """
    DTO for profile data.

    "user" is the owner's summary, or just the owner id when the user
    document no longer exists.
    """
    id: str = Field(..., alias="_id")
    user: Union[UserSummaryResponse, str]
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    usegithubavatar: bool = False
    social: SocialResponse = Field(default_factory=SocialResponse)
    experience: List[ExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)
    date: datetime

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "_id": "6651f0c2a1b2c3d4e5f60718",
                "user": {
                    "_id": "6651f0c2a1b2c3d4e5f60700",
                    "name": "Ada Lovelace",
                    "avatar": "https://gravatar.com/avatar/0bc83cb571cd1c50ba6f3e8a78ef1346?d=mm&r=pg&s=200",
                },
                "status": "Developer",
                "skills": ["Python", "FastAPI"],
                "social": {"twitter": "https://twitter.com/ada"},
                "experience": [],
                "education": [],
                "date": "2025-05-25T12:00:00Z",
            }
        }


class MessageResponse(BaseModel):
    """Plain message body used for confirmations and client errors."""
    msg: str

