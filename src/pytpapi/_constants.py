"""Internal constants shared across the library."""

USER_AGENT = "okhttp/4.12.0"

#: Bumping this invalidates every entry written by an older layout.
CACHE_FORMAT_VERSION = 2

# ------------------------------------------------------------------
# Remote config (Firebase) and vendor API
# ------------------------------------------------------------------

REMOTE_CONFIG_URL = "https://firebaseremoteconfig.googleapis.com/v1/projects/{project_id}/namespaces/firebase:fetch"
REMOTE_CONFIG_API_KEY_HEADER = "X-Goog-Api-Key"
DEFAULT_USERNAME_ENTRY = "v3_live_android_exozet_api_username"
DEFAULT_PASSWORD_ENTRY = "v3_live_android_exozet_api_password"
GRANT_TYPE = "client_credentials"

TOKEN_PATH = "api/v2/auth/token"
POIS_PATH = "api/v2/pois/{language}"
WAITING_TIMES_PATH = "api/v2/waitingtimes"
SEASONS_PATH = "api/v2/seasons/{language}"
AUTH_HEADER = "JWTAuthorization"

# ------------------------------------------------------------------
# Cache lifetimes (seconds)
# ------------------------------------------------------------------

#: Re-deriving the instance id faster than this gets the client throttled.
DEVICE_ID_TTL: float = 8 * 24 * 3600
REMOTE_CONFIG_TTL: float = 6 * 3600
DEFAULT_POI_CACHE_HOURS: float = 12.0
DEFAULT_SEASONS_CACHE_MINUTES: float = 60.0
DEFAULT_REQUEST_TIMEOUT: float = 30.0

# ------------------------------------------------------------------
# Calendar
# ------------------------------------------------------------------

SCHEDULE_WINDOW_DAYS = 61
