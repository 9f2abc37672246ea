# src/schemacheck/constants.py
"""Centralized constants for the JSON-LD validator.

This module contains fixed values that are used across multiple modules.
For user-configurable thresholds, see config.py and ValidationThresholds.
"""

# =============================================================================
# Scoring Constants
# =============================================================================

MAX_SCORE = 100
MIN_SCORE = 0

# Points deducted per finding
ERROR_PENALTY = 20
WARNING_PENALTY = 5
INFO_PENALTY = 1

# Score band lower bounds (see display.get_score_band)
GOOD_SCORE_THRESHOLD = 90
FAIR_SCORE_THRESHOLD = 70


# =============================================================================
# JSON-LD Structure Constants
# =============================================================================

# The one @context value accepted without a warning
STANDARD_CONTEXT = "https://schema.org"


# =============================================================================
# Datatype Constants
# =============================================================================

# Properties whose string values must be http(s) URLs
URL_PROPERTIES = ("url", "image", "logo", "sameAs", "mainEntityOfPage", "item")

# Properties expected to point at an image file
IMAGE_PROPERTIES = ("image", "logo", "photo")

# Accepted Offer.availability values
OFFER_AVAILABILITY_VALUES = (
    "InStock",
    "OutOfStock",
    "PreOrder",
    "SoldOut",
    "Discontinued",
)

DATE_FORMAT_SUGGESTION = (
    'Use strict ISO 8601 format: "YYYY-MM-DD" (e.g., "2024-01-15") or '
    '"YYYY-MM-DDTHH:mm:ssZ" (e.g., "2024-01-15T14:30:00Z"). '
    'Do not use formats like "01/15/2024" or "January 15, 2024"'
)


# =============================================================================
# Content Quality Constants
# =============================================================================

# Case-insensitive substrings that indicate unfinished content
PLACEHOLDER_PHRASES = (
    "lorem ipsum",
    "sample text",
    "placeholder",
    "coming soon",
    "under construction",
)


# =============================================================================
# Relationship Constants
# =============================================================================

# Type pairs that compete for the same rich result
CONFLICTING_TYPE_PAIRS = (
    ("Recipe", "HowTo"),
    ("Product", "Recipe"),
    ("Event", "Article"),
    ("FAQPage", "Article"),
    ("Review", "Article"),
)

# Site-identity types; a page should carry at least one of them
FOUNDATIONAL_TYPES = ("Organization", "WebSite")

# Types that describe the page's primary content
CONTENT_SPECIFIC_TYPES = ("Article", "Product", "Event", "FAQPage")


# =============================================================================
# Display Constants
# =============================================================================

STATUS_ICONS = {
    "valid": "✅",
    "valid-with-warnings": "⚠️",
    "invalid": "❌",
}
