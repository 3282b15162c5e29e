# Environment
ENV_BASE_URL = "GRAPHNODE_BASE_URL"
ENV_ACCESS_TOKEN = "GRAPHNODE_ACCESS_TOKEN"
DOTENV_FILE = ".env"

DEFAULT_BASE_URL = "https://taco4graphnode.online"
REFRESH_PATH = "/auth/refresh"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_COOKIE = "Cookie"
HEADER_RETRY_AFTER = "Retry-After"

# Content types
APPLICATION_JSON = "application/json"
APPLICATION_PROBLEM_JSON = "application/problem+json"

NO_CONTENT_STATUS_CODES = frozenset({204, 205})
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})
