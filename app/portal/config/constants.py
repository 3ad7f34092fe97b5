"""Portal constants"""
from types import MappingProxyType

from decouple import config

# Backend
API_BASE_URL = config("PORTAL_API_URL", default="https://setu.fit").rstrip("/")
LOGIN_ENDPOINT = "/api/auth/login"
REGISTER_ENDPOINT = "/api/auth/register"
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH"})

# Storage
REDIS_URL = config("REDIS_URL", default="")
KEY_PREFIX = config("PORTAL_KEY_PREFIX", default="portal")
TOKEN_KEY = "token"
USERS_KEY = "users"

# Navigation
DEFAULT_REDIRECT_URL = "dashboard.html"

# Passing year bounds (inclusive)
MIN_PASSING_YEAR = 1970
MAX_PASSING_YEAR = 2025

# Form modes
LOGIN_MODE = "login"
SIGNUP_MODE = "signup"
FORM_MODES = (LOGIN_MODE, SIGNUP_MODE)

# Submit control labels
LOGIN_BUTTON_LABEL = "Sign In"
SIGNUP_BUTTON_LABEL = "Create Account"
LOADING_BUTTON_LABEL = "Processing..."

DEPARTMENT_PLACEHOLDER = "Select Department"

# Course category -> ordered departments
DEPARTMENT_CATALOG = MappingProxyType({
    "UG": (
        "ECONOMICS", "ENGLISH", "GEOGRAPHY", "HINDI", "HISTORY",
        "PHILOSOPHY", "POLITICAL SCIENCE", "PSYCHOLOGY", "URDU",
        "BOTANY", "CHEMISTRY", "MATHEMATICS", "PHYSICS", "ZOOLOGY",
        "BCA", "BBA", "BED",
    ),
    "PG": (
        "ECONOMICS", "GEOGRAPHY", "HINDI", "HISTORY",
        "POLITICAL SCIENCE", "PHYSICS", "CHEMISTRY",
    ),
})

# User-facing messages
MESSAGES = MappingProxyType({
    "required_fields": "Please fill in all required fields",
    "invalid_registration": "Invalid registration number format",
    "duplicate_registration": "Registration number already exists",
    "invalid_year": f"Year must be between {MIN_PASSING_YEAR} and {MAX_PASSING_YEAR}",
    "weak_password": "Password must be at least 8 characters with letters and numbers",
    "password_mismatch": "Passwords do not match",
    "connection_failed": "Unable to connect to server. Please check if the backend is running.",
    "login_failed": "Login failed",
    "login_retry": "Login failed. Please try again.",
    "signup_failed": "Signup failed",
    "signup_retry": "Signup failed. Please try again.",
    "welcome": "Welcome back, {name}!",
    "account_created": "Account created successfully! You can now sign in.",
    "storage_failed": "Unable to access local storage. Please try again.",
    "session_store_failed": "Signed in, but the session could not be saved. Please try again.",
})

DEFAULT_DISPLAY_NAME = "User"
