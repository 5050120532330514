from tests.fakes.clock import FakeClock
from tests.fakes.github import FakeGitHubClient, raw_pull, raw_user
from tests.fakes.logger import FakeLogger
from tests.fakes.pull_requests import make_pr
from tests.fakes.transport import FakeTransport, page_of

__all__ = [
    "FakeClock",
    "FakeGitHubClient",
    "FakeLogger",
    "FakeTransport",
    "make_pr",
    "page_of",
    "raw_pull",
    "raw_user",
]
