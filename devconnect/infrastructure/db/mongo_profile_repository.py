"""
MongoDB Profile Repository
==========================

Concrete implementation of ProfileRepository using MongoDB.
"""
import logging
from typing import Dict, Iterable, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from devconnect.core.config import get_settings
from devconnect.domain.constants.profile_fields import (
    EducationFields,
    ExperienceFields,
    ProfileFields,
)
from devconnect.domain.constants.user_fields import UserFields
from devconnect.domain.models.profile import (
    SOCIAL_NETWORKS,
    Education,
    Experience,
    Profile,
    SocialLinks,
    UserSummary,
)
from devconnect.domain.repositories.profile_repository import ProfileRepository
from devconnect.infrastructure.db.mongo_connection import get_mongo_client
from devconnect.infrastructure.db.object_id import require_object_id, to_object_id
from devconnect.utils.datetime_utils import now, to_datetime

logger = logging.getLogger(__name__)


class MongoProfileRepository(ProfileRepository):
    """
    MongoDB implementation of ProfileRepository.

    Profiles reference their owner through an ObjectId "user" field, which is
    unique across the collection.
    """

    def __init__(self, database: Optional[Database] = None):
        """Initialize repository with a MongoDB database (defaults to the shared client)."""
        settings = get_settings()
        if database is None:
            database = get_mongo_client().get_database()
        self._collection = database[settings.profiles_collection]
        self._users = database[settings.users_collection]
        self._collection.create_index([(ProfileFields.USER, ASCENDING)], unique=True)

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def _experience_to_entity(self, doc: dict) -> Experience:
        return Experience(
            id=str(doc[ProfileFields.MONGO_ID]),
            title=doc.get(ExperienceFields.TITLE),
            company=doc.get(ExperienceFields.COMPANY),
            location=doc.get(ExperienceFields.LOCATION),
            from_date=doc.get(ExperienceFields.FROM),
            to_date=doc.get(ExperienceFields.TO),
            current=doc.get(ExperienceFields.CURRENT, False),
            description=doc.get(ExperienceFields.DESCRIPTION),
        )

    def _experience_to_document(self, experience: Experience) -> dict:
        return {
            ProfileFields.MONGO_ID: ObjectId(),
            ExperienceFields.TITLE: experience.title,
            ExperienceFields.COMPANY: experience.company,
            ExperienceFields.LOCATION: experience.location,
            ExperienceFields.FROM: to_datetime(experience.from_date),
            ExperienceFields.TO: to_datetime(experience.to_date),
            ExperienceFields.CURRENT: experience.current,
            ExperienceFields.DESCRIPTION: experience.description,
        }

    def _education_to_entity(self, doc: dict) -> Education:
        return Education(
            id=str(doc[ProfileFields.MONGO_ID]),
            school=doc.get(EducationFields.SCHOOL),
            degree=doc.get(EducationFields.DEGREE),
            fieldofstudy=doc.get(EducationFields.FIELD_OF_STUDY),
            from_date=doc.get(EducationFields.FROM),
            to_date=doc.get(EducationFields.TO),
            current=doc.get(EducationFields.CURRENT, False),
            description=doc.get(EducationFields.DESCRIPTION),
        )

    def _education_to_document(self, education: Education) -> dict:
        return {
            ProfileFields.MONGO_ID: ObjectId(),
            EducationFields.SCHOOL: education.school,
            EducationFields.DEGREE: education.degree,
            EducationFields.FIELD_OF_STUDY: education.fieldofstudy,
            EducationFields.FROM: to_datetime(education.from_date),
            EducationFields.TO: to_datetime(education.to_date),
            EducationFields.CURRENT: education.current,
            EducationFields.DESCRIPTION: education.description,
        }

    def _to_entity(self, doc: dict, user: Optional[UserSummary] = None) -> Profile:
        """Convert MongoDB document to Profile entity."""
        social = doc.get(ProfileFields.SOCIAL) or {}
        return Profile(
            id=str(doc[ProfileFields.MONGO_ID]),
            user_id=str(doc[ProfileFields.USER]),
            company=doc.get(ProfileFields.COMPANY),
            website=doc.get(ProfileFields.WEBSITE),
            location=doc.get(ProfileFields.LOCATION),
            bio=doc.get(ProfileFields.BIO),
            status=doc.get(ProfileFields.STATUS),
            skills=list(doc.get(ProfileFields.SKILLS) or []),
            githubusername=doc.get(ProfileFields.GITHUB_USERNAME),
            usegithubavatar=bool(doc.get(ProfileFields.USE_GITHUB_AVATAR, False)),
            social=SocialLinks(**{name: social.get(name) for name in SOCIAL_NETWORKS}),
            experience=[
                self._experience_to_entity(item)
                for item in doc.get(ProfileFields.EXPERIENCE) or []
            ],
            education=[
                self._education_to_entity(item)
                for item in doc.get(ProfileFields.EDUCATION) or []
            ],
            date=doc.get(ProfileFields.DATE) or now(),
            user=user,
        )

    def _to_document(self, profile: Profile) -> dict:
        """Convert the top-level fields of a Profile entity to a MongoDB document."""
        return {
            ProfileFields.USER: require_object_id(profile.user_id),
            ProfileFields.COMPANY: profile.company,
            ProfileFields.WEBSITE: profile.website,
            ProfileFields.LOCATION: profile.location,
            ProfileFields.BIO: profile.bio,
            ProfileFields.SKILLS: list(profile.skills),
            ProfileFields.STATUS: profile.status,
            ProfileFields.GITHUB_USERNAME: profile.githubusername,
            ProfileFields.USE_GITHUB_AVATAR: profile.usegithubavatar,
            ProfileFields.SOCIAL: {
                name: getattr(profile.social, name) for name in SOCIAL_NETWORKS
            },
        }

    def _load_users(self, user_ids: Iterable[ObjectId]) -> Dict[ObjectId, UserSummary]:
        """Fetch the name and avatar of the given users."""
        ids = list(set(user_ids))
        if not ids:
            return {}
        docs = self._users.find(
            {UserFields.MONGO_ID: {"$in": ids}},
            {UserFields.NAME: 1, UserFields.AVATAR: 1},
        )
        return {
            doc[UserFields.MONGO_ID]: UserSummary(
                id=str(doc[UserFields.MONGO_ID]),
                name=doc.get(UserFields.NAME),
                avatar=doc.get(UserFields.AVATAR),
            )
            for doc in docs
        }

    def _populate(self, doc: Optional[dict]) -> Optional[Profile]:
        """Convert a document to an entity with its owner attached."""
        if not doc:
            return None
        users = self._load_users([doc[ProfileFields.USER]])
        return self._to_entity(doc, users.get(doc[ProfileFields.USER]))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def upsert(self, profile: Profile) -> Profile:
        """Create or update the user's profile."""
        doc = self._to_document(profile)
        result = self._collection.find_one_and_update(
            {ProfileFields.USER: doc[ProfileFields.USER]},
            {
                "$set": doc,
                "$setOnInsert": {
                    ProfileFields.EXPERIENCE: [],
                    ProfileFields.EDUCATION: [],
                    ProfileFields.DATE: now(),
                },
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.info("Profile saved for user %s", profile.user_id)
        return self._populate(result)

    def find_by_user_id(self, user_id: str) -> Optional[Profile]:
        """Find the profile of a user."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return None
        return self._populate(self._collection.find_one({ProfileFields.USER: user_oid}))

    def find_all(self) -> List[Profile]:
        """Return every profile with its owner attached."""
        docs = list(self._collection.find())
        users = self._load_users(doc[ProfileFields.USER] for doc in docs)
        return [self._to_entity(doc, users.get(doc[ProfileFields.USER])) for doc in docs]

    def delete_by_user_id(self, user_id: str) -> bool:
        """Delete the profile of a user."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return False
        result = self._collection.delete_one({ProfileFields.USER: user_oid})
        return result.deleted_count > 0

    def _prepend(self, user_id: str, list_field: str, entry: dict) -> Optional[Profile]:
        """Read-modify-write: put an entry at the front of a nested list."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return None
        doc = self._collection.find_one({ProfileFields.USER: user_oid}, {list_field: 1})
        if not doc:
            return None
        entries = [entry] + list(doc.get(list_field) or [])
        result = self._collection.find_one_and_update(
            {ProfileFields.USER: user_oid},
            {"$set": {list_field: entries}},
            return_document=ReturnDocument.AFTER,
        )
        return self._populate(result)

    def _pull(self, user_id: str, list_field: str, entry_id: str) -> Optional[Profile]:
        """Remove the entry with the given id from a nested list."""
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return None
        entry_oid = to_object_id(entry_id)
        if entry_oid is None:
            # A malformed entry id matches nothing
            return self.find_by_user_id(user_id)
        result = self._collection.find_one_and_update(
            {ProfileFields.USER: user_oid},
            {"$pull": {list_field: {ProfileFields.MONGO_ID: entry_oid}}},
            return_document=ReturnDocument.AFTER,
        )
        return self._populate(result)

    def push_experience(self, user_id: str, experience: Experience) -> Optional[Profile]:
        """Insert an experience entry at the front of the list."""
        return self._prepend(
            user_id, ProfileFields.EXPERIENCE, self._experience_to_document(experience)
        )

    def pull_experience(self, user_id: str, experience_id: str) -> Optional[Profile]:
        """Remove the experience entry with the given id."""
        return self._pull(user_id, ProfileFields.EXPERIENCE, experience_id)

    def push_education(self, user_id: str, education: Education) -> Optional[Profile]:
        """Insert an education entry at the front of the list."""
        return self._prepend(
            user_id, ProfileFields.EDUCATION, self._education_to_document(education)
        )

    def pull_education(self, user_id: str, education_id: str) -> Optional[Profile]:
        """Remove the education entry with the given id."""
        return self._pull(user_id, ProfileFields.EDUCATION, education_id)
