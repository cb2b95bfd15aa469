r"""Resource wrappers of the NotiBoost API.

Each wrapper turns typed, resource-oriented calls into
``(method, path, body)`` triples executed by the owning client.
"""

from __future__ import annotations

__all__ = ["BaseResource", "Events", "Flows", "Templates", "Users", "Webhooks"]

from notiboost.resources.base import BaseResource
from notiboost.resources.events import Events
from notiboost.resources.flows import Flows
from notiboost.resources.templates import Templates
from notiboost.resources.users import Users
from notiboost.resources.webhooks import Webhooks
