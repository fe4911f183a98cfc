from pyscholar._version import __version__
from pyscholar._version import __version_tuple__
from pyscholar.client import PageFetcher
from pyscholar.client import RequestProfile
from pyscholar.core.cache import CacheConfig
from pyscholar.core.cache import CacheService
from pyscholar.core.cache import EntityCache
from pyscholar.core.config import config
from pyscholar.core.pagination import Paginator
from pyscholar.exceptions import InvalidRequestError
from pyscholar.exceptions import NotFoundError
from pyscholar.exceptions import ParseError
from pyscholar.exceptions import PyScholarException
from pyscholar.exceptions import TransportError
from pyscholar.fetcher import ScholarFetcher
from pyscholar.logger import get_logger
from pyscholar.logger import setup_logger
from pyscholar.models import Article
from pyscholar.models import Author
from pyscholar.models import AuthorMetrics
from pyscholar.models import CitationMetrics
from pyscholar.models import CoAuthor
from pyscholar.models import FetchQuantity
from pyscholar.models import ProfileCard
from pyscholar.models import Publication
from pyscholar.models import Scientist
from pyscholar.models import SortBy
from pyscholar.parsing import ScholarHTMLParser

__all__ = [
    "__version__",
    "__version_tuple__",
    "ScholarFetcher",
    "Paginator",
    "PageFetcher",
    "RequestProfile",
    "ScholarHTMLParser",
    "CacheConfig",
    "CacheService",
    "EntityCache",
    "config",
    "Article",
    "Author",
    "AuthorMetrics",
    "CitationMetrics",
    "CoAuthor",
    "FetchQuantity",
    "ProfileCard",
    "Publication",
    "Scientist",
    "SortBy",
    "PyScholarException",
    "InvalidRequestError",
    "TransportError",
    "ParseError",
    "NotFoundError",
    "setup_logger",
    "get_logger",
]
