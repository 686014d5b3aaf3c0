class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Jira base URL is missing. Pass base_url or set the JIRA_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class SecretMissingError(Exception):
    def __init__(
        self,
        message="Jira access token is missing. Pass secret or set the JIRA_ACCESS_TOKEN environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
