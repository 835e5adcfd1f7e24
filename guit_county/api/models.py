"""
Pydantic models used for request validation and API data contracts.

Collection schemas
------------------
Every collection has a ``*Fields`` model listing its writable fields. All
fields are optional: create and update both accept partial bodies, and only
the keys the client actually sent (``exclude_unset``) are written. Keys are
accepted in camelCase (the wire format) or snake_case; unknown keys and
system fields (``id``, ``createdAt``, ``updatedAt``) are ignored. Validation
is type coercion only (``"3"`` → ``3`` for integers, numbers → strings for
text fields); business rules such as non-empty names are not enforced.

A few collections have a stricter ``*Create`` model for inserts where the
underlying table requires a value (user email/password, newsletter email).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


BCRYPT_MAX_BYTES = 72
"""bcrypt only hashes the first 72 bytes of a password and rejects longer input."""


def check_password_length(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes")
    return value


class DocumentFields(BaseModel):
    """Base class of every collection schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class UserFields(DocumentFields):
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class UserCreate(UserFields):
    email: str
    password: str = Field(..., min_length=1)


class SlideFields(DocumentFields):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[str] = None
    btn_text: Optional[str] = None
    btn_link: Optional[str] = None
    order: Optional[int] = None
    status: Optional[str] = None


class ServiceFields(DocumentFields):
    name: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class EducationFields(DocumentFields):
    name: Optional[str] = None
    level: Optional[str] = None
    location: Optional[str] = None
    principal: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None


class HistoryFields(DocumentFields):
    title: Optional[str] = None
    year: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    media_type: Optional[str] = None
    media_url: Optional[str] = None


class HealthcareFields(DocumentFields):
    name: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    director: Optional[str] = None
    services: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None


class PoliticianFields(DocumentFields):
    name: Optional[str] = None
    position: Optional[str] = None
    party: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None
    status: Optional[str] = None


class MilitaryFields(DocumentFields):
    name: Optional[str] = None
    rank: Optional[str] = None
    branch: Optional[str] = None
    unit: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None
    status: Optional[str] = None


class PayamFields(DocumentFields):
    name: Optional[str] = None
    chief: Optional[str] = None
    population: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None


class BomaFields(DocumentFields):
    name: Optional[str] = None
    payam: Optional[str] = None
    chief: Optional[str] = None
    population: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None


class SportFields(DocumentFields):
    name: Optional[str] = None
    category: Optional[str] = None
    details: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None


class MessageFields(DocumentFields):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None


class NewsletterFields(DocumentFields):
    email: Optional[str] = None
    subscribed_at: Optional[datetime] = None


class NewsletterCreate(NewsletterFields):
    email: str


class SettingFields(DocumentFields):
    site_title: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None


class NewsFields(DocumentFields):
    title: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    media_type: Optional[str] = None
    media_url: Optional[str] = None
    likes: Optional[int] = None
    status: Optional[str] = None
    date: Optional[datetime] = None


class ArtistFields(DocumentFields):
    full_name: Optional[str] = None
    stage_name: Optional[str] = None
    category: Optional[str] = None
    genre: Optional[str] = None
    bio: Optional[str] = None
    achievements: Optional[str] = None
    payam: Optional[str] = None
    contact: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None
    photo: Optional[str] = None
    featured: Optional[bool] = None
    status: Optional[str] = None


class LeaderFields(DocumentFields):
    full_name: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    payam: Optional[str] = None
    boma: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    photo: Optional[str] = None
    status: Optional[str] = None


class StudentFields(DocumentFields):
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime] = None
    payam: Optional[str] = None
    photo: Optional[str] = None
    level: Optional[str] = None
    study_status: Optional[str] = None
    institution: Optional[str] = None
    country: Optional[str] = None
    field: Optional[str] = None
    specialization: Optional[str] = None
    year: Optional[str] = None
    enroll_year: Optional[int] = None
    grad_year: Optional[int] = None
    scholarship: Optional[bool] = None
    scholarship_name: Optional[str] = None
    scholarship_type: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    facebook: Optional[str] = None
    linked_in: Optional[str] = None
    achievements: Optional[str] = None
    activities: Optional[str] = None
    career_goal: Optional[str] = None
    member_status: Optional[str] = None
    join_date: Optional[datetime] = None
    notable: Optional[bool] = None
    status: Optional[str] = None


class CommissionerFields(DocumentFields):
    name: Optional[str] = None
    message: Optional[str] = None
    photo: Optional[str] = None


class RegistrationDetails(BaseModel):
    """
    Represents data submitted by the public registration form.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    email: str
    """Email address; also the source of the default username."""
    password: str = Field(..., min_length=1)
    """Plaintext password, hashed before storage."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class UserCredentials(BaseModel):
    """
    Represents login credentials for a user.
    """
    username: str
    """Username or email of the account."""
    password: str
    """The plaintext password provided for authentication."""


class FileRec(BaseModel):
    """Metadata for an uploaded/stored file."""
    original: str = Field(..., description="Original filename as provided by the client.", examples=["road.jpg"])
    path: str = Field(..., description="Server-side storage path.", examples=["uploads/image-1718000000000-5f1c2d3e4.jpg"])
    url: str = Field(..., description="Public URL under /uploads.", examples=["/uploads/image-1718000000000-5f1c2d3e4.jpg"])
    mime: str = Field(..., description="Declared MIME type of the file.", examples=["image/jpeg"])
    size: int = Field(..., description="Number of bytes written.")
