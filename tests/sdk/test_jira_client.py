import logging

import pytest

from jira_client import (
    BaseUrlMissingError,
    JiraClient,
    SecretMissingError,
    VersionsService,
)


class TestJiraClient:
    def test_explicit_arguments(self):
        client = JiraClient(base_url="https://test.atlassian.net", secret="secret")

        versions = client.versions

        assert isinstance(versions, VersionsService)
        assert (
            versions.build_url("/version")
            == "https://test.atlassian.net/rest/api/2/version"
        )

    def test_versions_service_is_reused(self):
        client = JiraClient(base_url="https://test.atlassian.net", secret="secret")

        assert client.versions is client.versions

    def test_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("JIRA_URL", "https://env.atlassian.net")
        monkeypatch.setenv("JIRA_ACCESS_TOKEN", "env-secret")
        monkeypatch.setenv("JIRA_API_VERSION", "3")

        versions = JiraClient().versions

        assert versions.build_url("/version/1") == (
            "https://env.atlassian.net/rest/api/3/version/1"
        )
        assert versions.auth_headers == {"Authorization": "Bearer env-secret"}

    def test_arguments_take_precedence(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("JIRA_URL", "https://env.atlassian.net")
        monkeypatch.setenv("JIRA_ACCESS_TOKEN", "env-secret")

        versions = JiraClient(secret="arg-secret").versions

        assert versions.auth_headers == {"Authorization": "Bearer arg-secret"}

    def test_missing_base_url(self):
        with pytest.raises(BaseUrlMissingError):
            JiraClient(secret="secret")

    def test_missing_secret(self):
        with pytest.raises(SecretMissingError):
            JiraClient(base_url="https://test.atlassian.net")

    def test_debug_logging_hides_secret(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="jira_client"):
            JiraClient(
                base_url="https://test.atlassian.net", secret="top-secret", debug=True
            )

        assert "https://test.atlassian.net" in caplog.text
        assert "top-secret" not in caplog.text
