"""REST API endpoints for the Cheshire Cat."""

from cheshirecat.rest.auth import AuthAPI
from cheshirecat.rest.memory import MemoryAPI
from cheshirecat.rest.plugins import PluginsAPI
from cheshirecat.rest.rabbit_hole import RabbitHoleAPI
from cheshirecat.rest.settings import SettingsAPI
from cheshirecat.rest.users import UsersAPI

__all__ = [
    "AuthAPI",
    "MemoryAPI",
    "PluginsAPI",
    "RabbitHoleAPI",
    "SettingsAPI",
    "UsersAPI",
]
