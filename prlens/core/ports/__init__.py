from prlens.core.ports.cache import Cache
from prlens.core.ports.clock import Clock
from prlens.core.ports.logger import Logger
from prlens.core.ports.pr_transport import PullRequestTransport

__all__ = [
    "Cache",
    "Clock",
    "Logger",
    "PullRequestTransport",
]
