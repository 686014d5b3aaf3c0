from importlib.metadata import PackageNotFoundError, version


def package_version() -> str:
    try:
        return version("jira-client")
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value() -> str:
    return f"JiraClient.Python/{package_version()}"
