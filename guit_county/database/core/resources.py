"""
Resource registry.

A *resource* is one collection exposed at ``/api/<name>``. Each entry ties
together the URL name, the ORM entity, the input schema(s), how the
collection appears in the public snapshot, and an optional write hook.
The generic CRUD routes and the public-data aggregator are both driven from
this table; neither contains per-collection branches.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from pydantic import BaseModel

from guit_county.api import models
from guit_county.crypt.encrypt_decrypt import EncryptionDec
from guit_county.database import entities


@dataclass(frozen=True)
class Resource:
    """
    Description of one collection.

    Attributes
    ----------
    name : str
        URL path segment and public-data key.
    entity : type
        ORM model.
    schema : type[BaseModel]
        Partial input schema used for updates (and creates, unless ``create_schema`` is set).
    create_schema : type[BaseModel] | None
        Stricter schema for inserts.
    public_status : str | None
        Status value a document needs to be public; None publishes everything.
    public_order : tuple[str, ...]
        Ordering of the public list as ``"column"`` (ascending) or ``"-column"`` (descending).
    before_write : callable | None
        ``hook(fields) -> fields`` applied to validated input before it is stored.
    """

    name: str
    entity: type
    schema: type[BaseModel]
    create_schema: Optional[type[BaseModel]] = None
    public_status: Optional[str] = None
    public_order: tuple = field(default_factory=tuple)
    before_write: Optional[Callable[[dict], dict]] = None

    def ordering(self, columns: tuple):
        """Translate ``("-date", "order")`` into SQLAlchemy ordering clauses, missing values last."""
        clauses = []
        for item in columns:
            if item.startswith("-"):
                clauses.append(getattr(self.entity, item[1:]).desc().nulls_last())
            else:
                clauses.append(getattr(self.entity, item).asc().nulls_last())
        return clauses

    def public_filters(self):
        if self.public_status is None:
            return []
        return [self.entity.status == self.public_status]


def hash_user_password(fields: dict) -> dict:
    """
    Hash a plaintext ``password`` field; already-hashed values are kept.

    An empty or null password is dropped so an update never wipes the
    stored credential.
    """
    password = fields.get("password")
    if "password" in fields and not password:
        return {key: value for key, value in fields.items() if key != "password"}
    enc = EncryptionDec()
    if password and not enc.is_hashed(password):
        fields = dict(fields, password=enc.hash_password(text=password))
    return fields


NEWS = Resource("news", entities.News, models.NewsFields,
                public_status="published", public_order=("-date",))
SERVICES = Resource("services", entities.Service, models.ServiceFields,
                    public_status="active", public_order=("-created_at",))
EDUCATION = Resource("education", entities.Education, models.EducationFields,
                     public_status="active", public_order=("created_at",))
HEALTHCARE = Resource("healthcare", entities.Healthcare, models.HealthcareFields,
                      public_status="active", public_order=("created_at",))
POLITICIANS = Resource("politicians", entities.Politician, models.PoliticianFields,
                       public_status="active", public_order=("created_at",))
MILITARY = Resource("military", entities.Military, models.MilitaryFields,
                    public_status="active", public_order=("created_at",))
PAYAMS = Resource("payams", entities.Payam, models.PayamFields,
                  public_status="active", public_order=("created_at",))
BOMAS = Resource("bomas", entities.Boma, models.BomaFields,
                 public_status="active", public_order=("created_at",))
SPORTS = Resource("sports", entities.Sport, models.SportFields,
                  public_status="active", public_order=("created_at",))
ARTISTS = Resource("artists", entities.Artist, models.ArtistFields,
                   public_status="active", public_order=("created_at",))
LEADERS = Resource("leaders", entities.Leader, models.LeaderFields,
                   public_status="active", public_order=("created_at",))
STUDENTS = Resource("students", entities.Student, models.StudentFields,
                    public_status="active", public_order=("created_at",))
SLIDES = Resource("slides", entities.Slide, models.SlideFields,
                  public_status="active", public_order=("order", "created_at"))
HISTORY = Resource("history", entities.History, models.HistoryFields,
                   public_order=("-year",))
MESSAGES = Resource("messages", entities.Message, models.MessageFields)
NEWSLETTER = Resource("newsletter", entities.Newsletter, models.NewsletterFields,
                      create_schema=models.NewsletterCreate)
USERS = Resource("users", entities.User, models.UserFields,
                 create_schema=models.UserCreate, before_write=hash_user_password)
COMMISSIONER = Resource("commissioner", entities.Commissioner, models.CommissionerFields)
SETTINGS = Resource("settings", entities.Setting, models.SettingFields)

CRUD_RESOURCES = (
    SLIDES, SERVICES, EDUCATION, HISTORY, HEALTHCARE, POLITICIANS, MILITARY,
    PAYAMS, BOMAS, SPORTS, MESSAGES, NEWSLETTER, USERS, NEWS, ARTISTS,
    LEADERS, STUDENTS, COMMISSIONER,
)
"""Collections exposed through the generic CRUD routes (settings has its own)."""

PUBLIC_RESOURCES = (
    NEWS, SERVICES, EDUCATION, HEALTHCARE, POLITICIANS, MILITARY, PAYAMS,
    BOMAS, SPORTS, ARTISTS, LEADERS, STUDENTS, SLIDES, HISTORY,
)
"""Collections listed in the public snapshot, in response key order."""

STATS_RESOURCES = (
    SERVICES, EDUCATION, HEALTHCARE, POLITICIANS, NEWS, ARTISTS, LEADERS,
    STUDENTS, USERS, SLIDES, PAYAMS, BOMAS, SPORTS, MILITARY, HISTORY,
    MESSAGES, COMMISSIONER,
)
"""Collections counted by ``/api/stats``."""
