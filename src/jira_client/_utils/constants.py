# Environment variables
ENV_BASE_URL = "JIRA_URL"
ENV_ACCESS_TOKEN = "JIRA_ACCESS_TOKEN"
ENV_API_VERSION = "JIRA_API_VERSION"

# Headers
HEADER_USER_AGENT = "User-Agent"

# Query parameters
QUERY_FIELDS = "fields"
QUERY_EXPAND = "expand"

DEFAULT_API_VERSION = "2"
DEFAULT_TIMEOUT = 30.0
