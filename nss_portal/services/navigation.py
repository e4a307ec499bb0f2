# File: nss_portal/services/navigation.py
"""Stack-based page router.

Functions take a ``NavigationState`` and return a new one. History holds
the pages visited before the current one, most recent last.
"""
from nss_portal.schemas.navigation import NavigationState, Page


def initial_state() -> NavigationState:
    return NavigationState(current_page=Page.LANDING, history=(Page.LANDING,))


def navigate_to(state: NavigationState, page: Page) -> NavigationState:
    return NavigationState(current_page=Page(page), history=state.history + (state.current_page,))


def navigate_back(state: NavigationState) -> NavigationState:
    if not state.history:
        # nothing to pop: fall back to landing and keep history empty
        return NavigationState(current_page=Page.LANDING, history=())
    return NavigationState(current_page=state.history[-1], history=state.history[:-1])


def reset_to_landing() -> NavigationState:
    return initial_state()
