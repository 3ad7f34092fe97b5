"""Controller context

Everything the orchestrators touch is reached through one injected object,
so tests substitute fakes without patching module globals.
"""
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from portal.api.client import ApiClient
from portal.config.constants import DEPARTMENT_CATALOG
from portal.messaging.service import MessageService
from portal.state.interface import KeyValueStoreInterface
from portal.state.known_users import KnownUsersCache
from portal.state.persistence import create_store
from portal.state.token_store import TokenStore
from portal.ui.navigation import NavigatorInterface, RecordingNavigator
from portal.ui.widgets import PortalView, build_view

from .form_state import FormStateController
from .scheduler import Scheduler


@dataclass
class PortalContext:
    api: ApiClient
    tokens: TokenStore
    known_users: KnownUsersCache
    view: PortalView
    messages: MessageService
    forms: FormStateController
    scheduler: Scheduler
    navigator: NavigatorInterface
    catalog: Mapping[str, Sequence[str]] = field(default_factory=lambda: DEPARTMENT_CATALOG)


def build_context(
    store: Optional[KeyValueStoreInterface] = None,
    api: Optional[ApiClient] = None,
    scheduler: Optional[Scheduler] = None,
    navigator: Optional[NavigatorInterface] = None,
    view: Optional[PortalView] = None,
    catalog: Mapping[str, Sequence[str]] = DEPARTMENT_CATALOG
) -> PortalContext:
    """Wire the default collaborators, overriding any that are passed in"""
    store = store if store is not None else create_store()
    scheduler = scheduler or Scheduler()
    view = view or build_view()
    messages = MessageService(view.message_area, scheduler)

    return PortalContext(
        api=api or ApiClient(),
        tokens=TokenStore(store),
        known_users=KnownUsersCache(store),
        view=view,
        messages=messages,
        forms=FormStateController(view, messages, catalog),
        scheduler=scheduler,
        navigator=navigator or RecordingNavigator(),
        catalog=catalog
    )
