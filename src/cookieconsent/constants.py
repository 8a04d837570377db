"""Application-wide constants for cookieconsent.

Constants that define the consent vocabulary and the cookie naming
convention shared with the front-end banner.
For deployment-specific settings, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Consent statuses
    "STATUS_DENIED",
    "STATUS_DISMISSED",
    "STATUS_ALLOWED",
    "STATUSES",
    # Compliance types
    "COMPLIANCE_TYPE_INFO",
    "COMPLIANCE_TYPE_OPT_IN",
    "COMPLIANCE_TYPE_OPT_OUT",
    "COMPLIANCE_TYPES",
    # Categories
    "CATEGORY_SESSION",
    "CATEGORY_ADS",
    "CATEGORY_USAGE_HELPER",
    "CATEGORY_PERFORMANCE",
    "CATEGORY_BEHAVIOR",
    "CATEGORIES",
    "CATEGORIES_REQUIRED",
    "BUILTIN_CATEGORY_TEXTS",
    # Cookie naming
    "STATUS_COOKIE_NAME",
    "COOKIE_OPTION_PREFIX",
    "TRUTHY_COOKIE_VALUES",
    "FALSY_COOKIE_VALUES",
]

APP_NAME = "cookieconsent"

# =============================================================================
# Consent statuses (values of the `cookieconsent_status` cookie)
# =============================================================================

STATUS_DENIED = "deny"
STATUS_DISMISSED = "dismiss"
STATUS_ALLOWED = "allow"

STATUSES: tuple[str, ...] = (STATUS_DENIED, STATUS_DISMISSED, STATUS_ALLOWED)

# =============================================================================
# Compliance types
# =============================================================================

COMPLIANCE_TYPE_INFO = "info"
COMPLIANCE_TYPE_OPT_IN = "opt-in"
COMPLIANCE_TYPE_OPT_OUT = "opt-out"

COMPLIANCE_TYPES: tuple[str, ...] = (
    COMPLIANCE_TYPE_INFO,
    COMPLIANCE_TYPE_OPT_IN,
    COMPLIANCE_TYPE_OPT_OUT,
)

# =============================================================================
# Built-in cookie categories
# =============================================================================

CATEGORY_SESSION = "session"
CATEGORY_ADS = "ads"
CATEGORY_USAGE_HELPER = "usagehelper"
CATEGORY_PERFORMANCE = "performance"
CATEGORY_BEHAVIOR = "behavior"

# Order is the display order of the settings form
CATEGORIES: tuple[str, ...] = (
    CATEGORY_SESSION,
    CATEGORY_ADS,
    CATEGORY_USAGE_HELPER,
    CATEGORY_PERFORMANCE,
    CATEGORY_BEHAVIOR,
)

# Always allowed, can never be disabled
CATEGORIES_REQUIRED: frozenset[str] = frozenset({CATEGORY_SESSION, CATEGORY_USAGE_HELPER})

# Default (untranslated) label and hint for built-in categories
BUILTIN_CATEGORY_TEXTS: dict[str, tuple[str, str]] = {
    CATEGORY_SESSION: (
        "Session",
        "Cookies required to keep you signed in and remember your session.",
    ),
    CATEGORY_ADS: (
        "Ads",
        "Cookies used to show personalized advertisements.",
    ),
    CATEGORY_USAGE_HELPER: (
        "Usage helper",
        "Cookies that remember your preferences, including this consent.",
    ),
    CATEGORY_PERFORMANCE: (
        "Performance",
        "Cookies that measure page load times and site performance.",
    ),
    CATEGORY_BEHAVIOR: (
        "Behavior",
        "Cookies that collect anonymous statistics about how the site is used.",
    ),
}

# =============================================================================
# Cookie naming convention (must match the deployed front end)
# =============================================================================

STATUS_COOKIE_NAME = "cookieconsent_status"
COOKIE_OPTION_PREFIX = "cookieconsent_option_"

# Accepted spellings of per-category override cookies (compared lowercased)
TRUTHY_COOKIE_VALUES: frozenset[str] = frozenset({"true", "1", "yes", "on"})
FALSY_COOKIE_VALUES: frozenset[str] = frozenset({"false", "0", "no", "off", ""})
