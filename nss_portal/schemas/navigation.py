# File: nss_portal/schemas/navigation.py
from typing import Tuple
import enum
from pydantic import BaseModel, ConfigDict


class Page(str, enum.Enum):
    LANDING = "landing"
    REGISTRATION = "registration"
    PORTFOLIO = "portfolio"
    LOGIN = "login"
    ADMIN = "admin"
    EVENTS = "events"
    DISPLAY = "display"
    FORGOT_PASSWORD = "forgot-password"


class NavigationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_page: Page = Page.LANDING
    history: Tuple[Page, ...] = (Page.LANDING,)
