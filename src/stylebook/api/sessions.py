import logging
import uuid
from collections import OrderedDict
from datetime import datetime

from stylebook.guide.parser import SectionParser
from stylebook.guide.store import SectionStore

logger = logging.getLogger(__name__)


class GuideSession:
    """A loaded style guide and the UI state the API keeps for it."""

    def __init__(self, guide_id: str, parser: SectionParser):
        self.id = guide_id
        self.created_at = datetime.utcnow()
        self.scroll_to: str | None = None
        self.store = SectionStore(parser=parser, on_scroll=self._request_scroll)

    def _request_scroll(self, section_id: str) -> None:
        self.scroll_to = section_id

    def load(self, markdown: str) -> None:
        self.scroll_to = None
        self.store.load(markdown)

    def take_scroll(self) -> str | None:
        section_id, self.scroll_to = self.scroll_to, None
        return section_id


class GuideRegistry:
    def __init__(self, max_guides: int = 100):
        self.max_guides = max_guides
        self._guides: OrderedDict[str, GuideSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._guides)

    def create(self, markdown: str, parser: SectionParser) -> GuideSession:
        session = GuideSession(str(uuid.uuid4()), parser)
        session.load(markdown)
        self._guides[session.id] = session

        while len(self._guides) > self.max_guides:
            evicted, _ = self._guides.popitem(last=False)
            logger.info(f"Evicted guide {evicted}")

        return session

    def get(self, guide_id: str) -> GuideSession | None:
        return self._guides.get(guide_id)

    def remove(self, guide_id: str) -> bool:
        return self._guides.pop(guide_id, None) is not None
