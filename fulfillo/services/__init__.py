"""
Services Module
"""
from .auth import AuthGate, Session, SessionRegistry, landing_page
from .onboarding import OnboardingPayload, OnboardingPipeline
from .pages import Capabilities, PageRouter, PageView, navigation_for, resolve_page
from .scoping import ScopedData, scope_collections

__all__ = [
    "AuthGate",
    "Session",
    "SessionRegistry",
    "landing_page",
    "OnboardingPayload",
    "OnboardingPipeline",
    "Capabilities",
    "PageRouter",
    "PageView",
    "navigation_for",
    "resolve_page",
    "ScopedData",
    "scope_collections",
]
