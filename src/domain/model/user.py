# domain/model/user.py

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Fields a caller may change on an existing user, in merge order.
MUTABLE_FIELDS = ('first_name', 'last_name', 'nickname', 'email', 'country', 'password')

REQUIRED_FIELDS = ('first_name', 'last_name', 'nickname', 'password', 'email', 'country')

# snake_case attribute → camelCase wire name
_WIRE_NAMES = {
    'id': 'id',
    'first_name': 'firstName',
    'last_name': 'lastName',
    'nickname': 'nickname',
    'password': 'password',
    'email': 'email',
    'country': 'country',
    'created_at': 'createdAt',
    'updated_at': 'updatedAt',
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not value:
        return _EPOCH
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


@dataclass
class User:
    """Domain model representing a user account."""
    first_name: str = ''
    last_name: str = ''
    nickname: str = ''
    password: str = ''
    email: str = ''
    country: str = ''
    id: str = ''
    created_at: datetime = field(default=_EPOCH)
    updated_at: datetime = field(default=_EPOCH)

    # ── queries ───────────────────────────────────────────

    def is_valid(self) -> bool:
        """True if every required field is non-empty."""
        return all(getattr(self, name) != '' for name in REQUIRED_FIELDS)

    def missing_fields(self) -> list[str]:
        return [_WIRE_NAMES[name] for name in REQUIRED_FIELDS if getattr(self, name) == '']

    # ── state transitions ─────────────────────────────────

    def modify(self, incoming: 'User') -> None:
        """Adopt every mutable field of ``incoming`` that differs from ours.

        There is no partial patch: an empty incoming value replaces a
        non-empty stored one. id and timestamps are left untouched.
        """
        for name in MUTABLE_FIELDS:
            value = getattr(incoming, name)
            if getattr(self, name) != value:
                setattr(self, name, value)

    # ── serialization ─────────────────────────────────────

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys and ISO-8601 UTC timestamps."""
        return {
            'id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'nickname': self.nickname,
            'password': self.password,
            'email': self.email,
            'country': self.country,
            'createdAt': _format_timestamp(self.created_at),
            'updatedAt': _format_timestamp(self.updated_at),
        }

    @staticmethod
    def from_dict(data: dict) -> 'User':
        """Inverse of :meth:`to_dict`; unknown keys are ignored."""
        return User(
            id=data.get('id', ''),
            first_name=data.get('firstName', ''),
            last_name=data.get('lastName', ''),
            nickname=data.get('nickname', ''),
            password=data.get('password', ''),
            email=data.get('email', ''),
            country=data.get('country', ''),
            created_at=_parse_timestamp(data.get('createdAt')),
            updated_at=_parse_timestamp(data.get('updatedAt')),
        )


@dataclass(frozen=True)
class UserFilters:
    """Sparse exact-match filters; an empty string leaves the field unconstrained."""
    first_name: str = ''
    last_name: str = ''
    nickname: str = ''
    email: str = ''
    country: str = ''

    def to_query(self) -> dict:
        """Compile into a document-store predicate (AND of equality clauses).

        Keys are the persisted snake_case field names. ``nickname`` is carried
        by the filter but not compiled into the predicate.
        """
        query = {}
        if self.first_name:
            query['first_name'] = self.first_name
        if self.last_name:
            query['last_name'] = self.last_name
        if self.email:
            query['email'] = self.email
        if self.country:
            query['country'] = self.country
        return query


@dataclass
class PaginatedUsers:
    """One page of users plus its page descriptor fields."""
    total_count: int
    total_pages: int
    current_page: int
    size: int
    has_more: bool
    users: list[User] = field(default_factory=list)
