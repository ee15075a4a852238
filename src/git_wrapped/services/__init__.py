"""Platform clients, collectors and report assembly."""

from git_wrapped.services.contributions_api_client import ContributionsAPIClient
from git_wrapped.services.demo import DEMO_USERNAME, build_demo_report
from git_wrapped.services.github_collector import GitHubWrappedCollector
from git_wrapped.services.github_graphql_client import GitHubGraphQLClient
from git_wrapped.services.github_rest_client import GitHubRestClient
from git_wrapped.services.gitlab_client import GitLabClient
from git_wrapped.services.gitlab_collector import GitLabWrappedCollector
from git_wrapped.services.report_builder import build_wrapped_report

__all__ = [
    "GitHubRestClient",
    "GitHubGraphQLClient",
    "ContributionsAPIClient",
    "GitLabClient",
    "GitHubWrappedCollector",
    "GitLabWrappedCollector",
    "build_wrapped_report",
    "build_demo_report",
    "DEMO_USERNAME",
]
