"""Request header and cookie configuration for the page fetcher."""

import random
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace

from pyscholar.core.config import config

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:125.0) Gecko/20100101 "
    "Firefox/125.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.4; rv:125.0) Gecko/20100101 "
    "Firefox/125.0",
)

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


@dataclass(frozen=True)
class RequestProfile:
    """Static request configuration passed into a :class:`PageFetcher`.

    Cookie accumulation never mutates a profile: :meth:`with_cookies`
    returns a new one.
    """

    referer: str = field(default_factory=lambda: f"{config.base_url}/")
    user_agents: tuple[str, ...] = USER_AGENTS
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    cookies: dict[str, str] = field(default_factory=dict)

    def pick_user_agent(self, rng: random.Random | None = None) -> str:
        chooser = rng or random
        return chooser.choice(self.user_agents)

    def cookie_header(self) -> str | None:
        if not self.cookies:
            return None
        return "; ".join(f"{name}={value}" for name, value in self.cookies.items())

    def build_headers(self, rng: random.Random | None = None) -> dict[str, str]:
        """Headers for one request, with a freshly rotated user agent."""
        headers = dict(self.headers)
        headers["User-Agent"] = self.pick_user_agent(rng)
        headers["Referer"] = self.referer
        cookie = self.cookie_header()
        if cookie:
            headers["Cookie"] = cookie
        return headers

    def with_cookies(self, cookies: dict[str, str]) -> "RequestProfile":
        """Return a profile whose cookie map also contains ``cookies``."""
        if not cookies:
            return self
        return replace(self, cookies={**self.cookies, **cookies})
