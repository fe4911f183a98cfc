"""Author and co-author models.

Both records carry the same :class:`ProfileCard` by composition.
"""

from .base import ScholarRecord


class ProfileCard(ScholarRecord):
    """Identity fields shared by authors and co-authors."""

    id: str
    name: str
    affiliation: str = ""
    picture_url: str = ""


class Author(ScholarRecord):
    """Details of the profile owner."""

    card: ProfileCard
    interests: tuple[str, ...] = ()
    verified_email: str = ""

    @property
    def id(self) -> str:
        return self.card.id

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def affiliation(self) -> str:
        return self.card.affiliation

    @property
    def picture_url(self) -> str:
        return self.card.picture_url


class CoAuthor(ScholarRecord):
    """A co-author listed on a profile page."""

    card: ProfileCard

    @property
    def id(self) -> str:
        return self.card.id

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def affiliation(self) -> str:
        return self.card.affiliation

    @property
    def picture_url(self) -> str:
        return self.card.picture_url


# Alternate name used for profile owners
Scientist = Author
