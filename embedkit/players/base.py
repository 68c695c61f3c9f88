"""
Media player interface.

Defines the capability interface every player engine implements, plus the
URL filtering and naming helpers shared between engines.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .. import constants
from ..models import EmbedResult, SourceClass
from ..utils import get_extension, get_filename, get_scheme


@dataclass
class MediaPlayer:
    """Base capability interface for media player engines."""
    name: str

    def embed(
        self,
        urls: Sequence[str],
        name: str = "",
        width: Any = 0,
        height: Any = 0,
        options: Optional[dict] = None,
    ) -> EmbedResult:
        raise NotImplementedError

    def resolve(self, urls: Sequence[str], options: Any = None, width: Any = 0, height: Any = 0) -> Any:
        raise NotImplementedError

    def classify(self, url: str) -> SourceClass:
        raise NotImplementedError

    def get_rank(self) -> int:
        raise NotImplementedError

    def is_enabled(self) -> bool:
        raise NotImplementedError

    def get_supported_extensions(self) -> List[str]:
        raise NotImplementedError

    def list_supported_urls(self, urls: Sequence[str]) -> List[str]:
        """Keep only URLs whose extension is enabled for this player."""
        extensions = self.get_supported_extensions()
        return [url for url in urls if get_extension(url) in extensions]

    def get_embeddable_markers(self) -> List[str]:
        """Markers a URL must contain to be considered for embedding."""
        return [f".{extension}" for extension in self.get_supported_extensions()]

    @staticmethod
    def get_name(name: str, urls: Sequence[str]) -> str:
        """Display name: the given name, else the file name of the first URL."""
        if name:
            return name
        if not urls:
            return ""
        return get_filename(str(urls[0]))

    @staticmethod
    def is_rtmp(url: str) -> bool:
        return get_scheme(url) == constants.RTMP_SCHEME
