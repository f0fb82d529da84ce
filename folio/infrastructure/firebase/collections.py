"""Firestore collection names (schema-in-code).

Firestore has no DDL. Collections are created when the first document is
written. Use these constants so the site and its scripts agree on names.
"""

# Public content
COLLECTION_PROJECTS = "projects"
COLLECTION_BLOG_POSTS = "blog_posts"
COLLECTION_BLOG_COMMENTS = "blog_comments"
COLLECTION_TESTIMONIALS = "testimonials"

# About page sections
COLLECTION_SKILLS = "skills"
COLLECTION_EXPERIENCES = "experiences"
COLLECTION_EDUCATIONS = "educations"
COLLECTION_BIOGRAPHY = "biography"
COLLECTION_SOCIAL_MEDIA = "social_media"

# People
COLLECTION_PROFILES = "profiles"
COLLECTION_CONTACTS = "contacts"

# Site-wide
COLLECTION_STATS = "stats"
STATS_VISITORS_DOC = "visitors"
COLLECTION_SETTINGS = "settings"
SETTINGS_GLOBAL_DOC = "global"
SETTINGS_BLOG_DOC = "blog"
