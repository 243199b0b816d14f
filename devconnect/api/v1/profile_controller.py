"""
Profile Controller
==================

FastAPI controller for profile management endpoints.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from devconnect.application.dto.profile_dto import (
    EducationCreateRequest,
    EducationResponse,
    ExperienceCreateRequest,
    ExperienceResponse,
    MessageResponse,
    ProfileResponse,
    ProfileUpsertRequest,
    SocialResponse,
    UserSummaryResponse,
)
from devconnect.api.v1.dependencies import get_current_user_id, get_profile_service
from devconnect.application.services.profile_service import ProfileService
from devconnect.domain.exceptions import (
    GitHubLookupError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from devconnect.domain.models.profile import Profile

logger = logging.getLogger(__name__)
router = APIRouter(tags=["profile"])

GITHUB_NOT_FOUND = "No Github profile found"


def to_profile_response(profile: Profile) -> ProfileResponse:
    """Convert a Profile entity to its API representation."""
    if profile.user is not None:
        user = UserSummaryResponse(
            id=profile.user.id,
            name=profile.user.name,
            avatar=profile.user.avatar,
        )
    else:
        user = profile.user_id

    return ProfileResponse(
        id=profile.id,
        user=user,
        status=profile.status,
        skills=profile.skills,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        githubusername=profile.githubusername,
        usegithubavatar=profile.usegithubavatar,
        social=SocialResponse(
            youtube=profile.social.youtube,
            twitter=profile.social.twitter,
            instagram=profile.social.instagram,
            linkedin=profile.social.linkedin,
            facebook=profile.social.facebook,
        ),
        experience=[
            ExperienceResponse(
                id=exp.id,
                title=exp.title,
                company=exp.company,
                location=exp.location,
                from_date=exp.from_date,
                to_date=exp.to_date,
                current=exp.current,
                description=exp.description,
            )
            for exp in profile.experience
        ],
        education=[
            EducationResponse(
                id=edu.id,
                school=edu.school,
                degree=edu.degree,
                fieldofstudy=edu.fieldofstudy,
                from_date=edu.from_date,
                to_date=edu.to_date,
                current=edu.current,
                description=edu.description,
            )
            for edu in profile.education
        ],
        date=profile.date,
    )


def _bad_request(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"errors": [{"msg": message, "param": "body", "location": "body"}]},
    )


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get current user's profile",
    description="Get the caller's profile with their name and avatar attached."
)
def get_my_profile(
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the caller's profile."""
    try:
        profile = service.get_own_profile(user_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update profile",
    description="""
    Create the caller's profile, or update it if one exists.

    When a profile is saved:
    1. Website and social links are normalized to https URLs
    2. The user's avatar is refreshed from GitHub (usegithubavatar) or Gravatar
    3. The profile document is upserted; experience and education are kept
    """
)
async def upsert_profile(
    request: ProfileUpsertRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create or update the caller's profile."""
    try:
        profile = await service.upsert_profile(user_id, request)
    except ValueError as e:
        raise _bad_request(str(e))
    except GitHubLookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GITHUB_NOT_FOUND)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")

    logger.info("Profile %s saved for user %s", profile.id, user_id)
    return to_profile_response(profile)


@router.get(
    "",
    response_model=List[ProfileResponse],
    summary="List profiles",
    description="Get every profile with its owner's name and avatar."
)
def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> List[ProfileResponse]:
    """List all profiles."""
    return [to_profile_response(profile) for profile in service.list_profiles()]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get profile by user ID",
    description="Get the profile of a specific user."
)
def get_profile_by_user_id(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get a profile by its owner's id."""
    try:
        profile = service.get_profile_by_user_id(user_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete profile, user and posts",
    description="Delete the caller's posts, profile and user account."
)
def delete_account(
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the caller's account."""
    service.delete_account(user_id)
    return MessageResponse(msg="User deleted")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add profile experience",
    description="Add an experience entry at the front of the caller's experience list."
)
def add_experience(
    request: ExperienceCreateRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an experience entry."""
    try:
        profile = service.add_experience(user_id, request)
    except ValueError as e:
        raise _bad_request(str(e))
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Delete profile experience",
    description="Remove an experience entry from the caller's profile."
)
def remove_experience(
    exp_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an experience entry."""
    try:
        profile = service.remove_experience(user_id, exp_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add profile education",
    description="Add an education entry at the front of the caller's education list."
)
def add_education(
    request: EducationCreateRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an education entry."""
    try:
        profile = service.add_education(user_id, request)
    except ValueError as e:
        raise _bad_request(str(e))
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Delete profile education",
    description="Remove an education entry from the caller's profile."
)
def remove_education(
    edu_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an education entry."""
    try:
        profile = service.remove_education(user_id, edu_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return to_profile_response(profile)


@router.get(
    "/github/{username}",
    response_model=List[Dict[str, Any]],
    summary="Get GitHub repositories",
    description="Get the most recently created public repositories of a GitHub user."
)
async def get_github_repos(
    username: str,
    service: ProfileService = Depends(get_profile_service),
) -> List[Dict[str, Any]]:
    """List a GitHub user's newest repositories."""
    try:
        return await service.get_github_repos(username)
    except GitHubLookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GITHUB_NOT_FOUND)
