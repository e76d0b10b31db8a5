"""Collection names and fixed identifiers used by the repositories."""

PROFILE_COLLECTION = "profile"
SKILLS_COLLECTION = "skills"
EXPERIENCES_COLLECTION = "experiences"
PROJECTS_COLLECTION = "projects"
BLOG_POSTS_COLLECTION = "blog_posts"
CONTACT_MESSAGES_COLLECTION = "contact_messages"

# The profile collection holds exactly one document.
PROFILE_DOCUMENT_ID = "main"

# Blog post rules
SLUG_MAX_ATTEMPTS = 10
EXCERPT_LENGTH = 200
EXCERPT_ELLIPSIS = "..."
