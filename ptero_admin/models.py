"""
Ptero-Admin Models
Wrappers around the objects returned by the Application API.

Every panel object arrives as {"object": "<type>", "attributes": {...}}.
The models accept either that envelope or the bare attributes and keep the
attributes untouched in `.raw`.
"""

from typing import Optional, List, Dict, Any


def _attributes(data: Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(data, dict) and isinstance(data.get("attributes"), dict):
        return data["attributes"]
    return data or {}


class Limits:
    def __init__(self, data: Dict[str, Any]):
        data = data or {}
        self.memory: Optional[int] = data.get('memory')
        self.swap: Optional[int] = data.get('swap')
        self.disk: Optional[int] = data.get('disk')
        self.io: Optional[int] = data.get('io')
        self.cpu: Optional[int] = data.get('cpu')
        self.threads: Optional[str] = data.get('threads')
        self.oom_disabled: Optional[bool] = data.get('oom_disabled')

    def __repr__(self):
        return f"<Limits memory={self.memory} disk={self.disk} cpu={self.cpu}>"


class FeatureLimits:
    def __init__(self, data: Dict[str, Any]):
        data = data or {}
        self.databases: Optional[int] = data.get('databases')
        self.allocations: Optional[int] = data.get('allocations')
        self.backups: Optional[int] = data.get('backups')

    def __repr__(self):
        return f"<FeatureLimits databases={self.databases} allocations={self.allocations}>"


class Container:
    def __init__(self, data: Dict[str, Any]):
        data = data or {}
        self.startup_command: Optional[str] = data.get('startup_command')
        self.image: Optional[str] = data.get('image')
        self.installed: bool = bool(data.get('installed'))
        self.environment: Dict[str, Any] = data.get('environment') or {}


class Pagination:
    def __init__(self, data: Dict[str, Any]):
        data = data or {}
        self.total: int = data.get('total', 0)
        self.count: int = data.get('count', 0)
        self.per_page: int = data.get('per_page', 0)
        self.current_page: int = data.get('current_page', 1)
        self.total_pages: int = data.get('total_pages', 1)
        self.links: Dict[str, Any] = data.get('links') or {}

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __repr__(self):
        return f"<Pagination page={self.current_page}/{self.total_pages} total={self.total}>"


class Server:
    """A server as seen by the Application API."""

    def __init__(self, data: Dict[str, Any]):
        self.raw = _attributes(data)
        attrs = self.raw
        self.id: int = attrs.get('id')
        self.external_id: Optional[str] = attrs.get('external_id')
        self.uuid: str = attrs.get('uuid')
        self.identifier: str = attrs.get('identifier')
        self.name: str = attrs.get('name')
        self.description: Optional[str] = attrs.get('description')
        # newer panels report a status string instead of the suspended flag
        self.suspended: bool = bool(attrs.get('suspended')) or attrs.get('status') == 'suspended'
        self.limits = Limits(attrs.get('limits'))
        self.feature_limits = FeatureLimits(attrs.get('feature_limits'))
        self.user: int = attrs.get('user')
        self.node: int = attrs.get('node')
        self.allocation: int = attrs.get('allocation')
        self.nest: int = attrs.get('nest')
        self.egg: int = attrs.get('egg')
        self.pack: Optional[int] = attrs.get('pack')
        self.container = Container(attrs.get('container'))
        self.created_at: Optional[str] = attrs.get('created_at')
        self.updated_at: Optional[str] = attrs.get('updated_at')

    def __repr__(self):
        return f"<Server id={self.id} name='{self.name}'>"


class Database:
    """A database belonging to a server."""

    def __init__(self, data: Dict[str, Any]):
        self.raw = _attributes(data)
        attrs = self.raw
        self.id: int = attrs.get('id')
        self.server: int = attrs.get('server')
        self.host: int = attrs.get('host')
        self.database: str = attrs.get('database')
        self.username: str = attrs.get('username')
        self.remote: str = attrs.get('remote')
        self.max_connections: Optional[int] = attrs.get('max_connections')
        self.created_at: Optional[str] = attrs.get('created_at')
        self.updated_at: Optional[str] = attrs.get('updated_at')

        # only present after a password reset or with ?include=password
        password = (attrs.get('relationships') or {}).get('password')
        self.password: Optional[str] = _attributes(password).get('password') if password else None

    def __repr__(self):
        return f"<Database id={self.id} name='{self.database}'>"


class User:
    """A panel user account."""

    def __init__(self, data: Dict[str, Any]):
        self.raw = _attributes(data)
        attrs = self.raw
        self.id: int = attrs.get('id')
        self.external_id: Optional[str] = attrs.get('external_id')
        self.uuid: str = attrs.get('uuid')
        self.username: str = attrs.get('username')
        self.email: str = attrs.get('email')
        self.first_name: str = attrs.get('first_name')
        self.last_name: str = attrs.get('last_name')
        self.language: str = attrs.get('language')
        self.root_admin: bool = bool(attrs.get('root_admin'))
        self.two_factor: bool = bool(attrs.get('2fa'))
        self.created_at: Optional[str] = attrs.get('created_at')
        self.updated_at: Optional[str] = attrs.get('updated_at')

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def __repr__(self):
        return f"<User id={self.id} username='{self.username}'>"


class ServerList:
    def __init__(self, data: Dict[str, Any]):
        self.servers: List[Server] = [Server(item) for item in (data.get('data') or [])]
        self.pagination = Pagination((data.get('meta') or {}).get('pagination'))

    def __iter__(self):
        return iter(self.servers)

    def __len__(self):
        return len(self.servers)


class UserList:
    def __init__(self, data: Dict[str, Any]):
        self.users: List[User] = [User(item) for item in (data.get('data') or [])]
        self.pagination = Pagination((data.get('meta') or {}).get('pagination'))

    def __iter__(self):
        return iter(self.users)

    def __len__(self):
        return len(self.users)
