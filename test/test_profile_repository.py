"""
Tests for the MongoDB repositories, run against mongomock.
"""
from datetime import datetime, timezone

from bson import ObjectId

from devconnect.domain.models.profile import Education, Experience, Profile, SocialLinks


def _profile(user_id: str, **overrides) -> Profile:
    fields = dict(
        user_id=user_id,
        status="Developer",
        skills=["Python"],
        social=SocialLinks(twitter="https://twitter.com/ada"),
    )
    fields.update(overrides)
    return Profile(**fields)


def _experience(title: str, year: int) -> Experience:
    return Experience(
        title=title,
        company="Acme",
        from_date=datetime(year, 1, 1, tzinfo=timezone.utc),
    )


class TestProfileUpsert:
    """Upsert keeps a single profile per user."""

    def test_creates_profile_with_owner_attached(self, profile_repository, user, user_id):
        profile = profile_repository.upsert(_profile(user_id))

        assert profile.id is not None
        assert profile.user_id == user_id
        assert profile.user.name == "Ada Lovelace"
        assert profile.social.twitter == "https://twitter.com/ada"
        assert profile.experience == []
        assert profile.education == []

    def test_second_upsert_updates_instead_of_duplicating(self, profile_repository, database, user_id):
        first = profile_repository.upsert(_profile(user_id))
        second = profile_repository.upsert(_profile(user_id, status="Senior Developer", skills=["Go", "Rust"]))

        assert database.profiles.count_documents({}) == 1
        assert second.id == first.id
        assert second.status == "Senior Developer"
        assert second.skills == ["Go", "Rust"]

    def test_upsert_keeps_experience_and_education(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))
        profile_repository.push_experience(user_id, _experience("Engineer", 2020))

        updated = profile_repository.upsert(_profile(user_id, bio="new bio"))

        assert updated.bio == "new bio"
        assert [exp.title for exp in updated.experience] == ["Engineer"]


class TestProfileQueries:
    def test_find_by_user_id(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))

        found = profile_repository.find_by_user_id(user_id)

        assert found is not None
        assert found.user.id == user_id

    def test_find_by_unknown_or_malformed_id(self, profile_repository):
        assert profile_repository.find_by_user_id(str(ObjectId())) is None
        assert profile_repository.find_by_user_id("not-an-object-id") is None

    def test_find_all_attaches_each_owner(self, profile_repository, user_id, other_user):
        profile_repository.upsert(_profile(user_id))
        profile_repository.upsert(_profile(str(other_user["_id"])))

        profiles = profile_repository.find_all()

        assert sorted(p.user.name for p in profiles) == ["Ada Lovelace", "Grace Hopper"]

    def test_profile_without_user_document_has_no_summary(self, profile_repository):
        orphan_id = str(ObjectId())
        profile_repository.upsert(_profile(orphan_id))

        profile = profile_repository.find_by_user_id(orphan_id)

        assert profile.user is None
        assert profile.user_id == orphan_id

    def test_delete_by_user_id(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))

        assert profile_repository.delete_by_user_id(user_id) is True
        assert profile_repository.delete_by_user_id(user_id) is False
        assert profile_repository.find_by_user_id(user_id) is None


class TestNestedLists:
    """Experience and education are most-recent-first and removable by id."""

    def test_push_experience_prepends(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))

        profile_repository.push_experience(user_id, _experience("Junior", 2018))
        profile = profile_repository.push_experience(user_id, _experience("Senior", 2021))

        assert [exp.title for exp in profile.experience] == ["Senior", "Junior"]
        assert all(exp.id for exp in profile.experience)
        assert profile.experience[0].id != profile.experience[1].id

    def test_pull_experience_removes_exactly_that_entry(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))
        for index, title in enumerate(["A", "B", "C"]):
            profile_repository.push_experience(user_id, _experience(title, 2015 + index))
        profile = profile_repository.find_by_user_id(user_id)
        middle = profile.experience[1]

        updated = profile_repository.pull_experience(user_id, middle.id)

        assert [exp.title for exp in updated.experience] == ["C", "A"]

    def test_pull_unknown_or_malformed_id_keeps_list(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))
        profile_repository.push_experience(user_id, _experience("Engineer", 2020))

        assert len(profile_repository.pull_experience(user_id, str(ObjectId())).experience) == 1
        assert len(profile_repository.pull_experience(user_id, "bogus").experience) == 1

    def test_nested_edits_without_profile_return_none(self, profile_repository, user_id):
        assert profile_repository.push_experience(user_id, _experience("Engineer", 2020)) is None
        assert profile_repository.pull_experience(user_id, str(ObjectId())) is None
        assert profile_repository.pull_education(user_id, str(ObjectId())) is None

    def test_education_push_and_pull(self, profile_repository, user_id):
        profile_repository.upsert(_profile(user_id))
        education = Education(
            school="University of London",
            degree="BSc",
            fieldofstudy="Mathematics",
            from_date=datetime(2010, 9, 1, tzinfo=timezone.utc),
            to_date=datetime(2013, 6, 30, tzinfo=timezone.utc),
        )

        profile = profile_repository.push_education(user_id, education)
        entry = profile.education[0]
        assert entry.school == "University of London"
        assert entry.fieldofstudy == "Mathematics"

        profile = profile_repository.pull_education(user_id, entry.id)
        assert profile.education == []


class TestUserAndPostRepositories:
    def test_update_avatar(self, user_repository, user_id):
        assert user_repository.update_avatar(user_id, "https://example.com/a.png") is True

        assert user_repository.find_by_id(user_id).avatar == "https://example.com/a.png"

    def test_update_avatar_of_missing_user(self, user_repository):
        assert user_repository.update_avatar(str(ObjectId()), "https://example.com/a.png") is False
        assert user_repository.update_avatar("bogus", "https://example.com/a.png") is False

    def test_delete_user(self, user_repository, user_id):
        assert user_repository.delete(user_id) is True
        assert user_repository.find_by_id(user_id) is None

    def test_delete_posts_of_one_user_only(self, post_repository, database, user, other_user):
        database.posts.insert_many([
            {"user": user["_id"], "text": "one"},
            {"user": user["_id"], "text": "two"},
            {"user": other_user["_id"], "text": "three"},
        ])

        assert post_repository.delete_by_user_id(str(user["_id"])) == 2
        assert database.posts.count_documents({}) == 1
