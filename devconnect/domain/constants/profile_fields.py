"""Constants for Profile document field names"""


class ProfileFields:
    """Field name constants for Profile documents"""
    USER = "user"
    COMPANY = "company"
    WEBSITE = "website"
    LOCATION = "location"
    BIO = "bio"
    SKILLS = "skills"
    STATUS = "status"
    GITHUB_USERNAME = "githubusername"
    USE_GITHUB_AVATAR = "usegithubavatar"
    SOCIAL = "social"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"


class ExperienceFields:
    """Field name constants for experience sub-documents"""
    TITLE = "title"
    COMPANY = "company"
    LOCATION = "location"
    FROM = "from"
    TO = "to"
    CURRENT = "current"
    DESCRIPTION = "description"


class EducationFields:
    """Field name constants for education sub-documents"""
    SCHOOL = "school"
    DEGREE = "degree"
    FIELD_OF_STUDY = "fieldofstudy"
    FROM = "from"
    TO = "to"
    CURRENT = "current"
    DESCRIPTION = "description"
