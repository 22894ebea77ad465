"""Checks guarding every meta box save.

A save goes ahead only when the submitted anti-forgery token is valid for the
box action and the acting user holds the box capability for the record.
Failures are silent: callers simply skip the save.
"""
from __future__ import annotations

import logging

from django.core import signing

from .conf import settings

log = logging.getLogger(__name__)

__all__ = ["make_token", "verify_token", "has_capability", "SecurityGate"]


def _bypass_all(user) -> bool:
    """Return True if the user should bypass capability checks.

    Superusers always bypass. Staff bypass is controlled by the
    ``METABOX_STAFF_BYPASS`` setting.
    """

    if getattr(user, "is_superuser", False):
        return True
    return bool(settings.METABOX_STAFF_BYPASS and getattr(user, "is_staff", False))


def _signer(action_key: str) -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=f"django_metabox.{action_key}")


def _user_ref(user) -> str:
    return str(getattr(user, "pk", None) or "")


def make_token(action_key: str, user) -> str:
    """Issue a token binding ``action_key`` to ``user``."""
    return _signer(action_key).sign(_user_ref(user))


def verify_token(token, action_key: str, user) -> bool:
    if not token or not isinstance(token, str):
        return False
    try:
        value = _signer(action_key).unsign(token, max_age=settings.METABOX_TOKEN_MAX_AGE)
    except signing.BadSignature:
        # SignatureExpired is a BadSignature subclass.
        return False
    return value == _user_ref(user)


def has_capability(user, capability: str, record=None) -> bool:
    """Return whether ``user`` holds ``capability``, globally or on ``record``."""

    if user is None or not getattr(user, "is_authenticated", False):
        return False
    if _bypass_all(user):
        return True
    if user.has_perm(capability):
        return True
    return record is not None and user.has_perm(capability, record)


class SecurityGate:
    def __init__(self, nonce_key: str, action_key: str, capability: str):
        self.nonce_key = nonce_key
        self.action_key = action_key
        self.capability = capability

    def token_for(self, user) -> str:
        return make_token(self.action_key, user)

    def allows(self, request, record) -> bool:
        user = getattr(request, "user", None)
        token = request.POST.get(self.nonce_key)
        if not verify_token(token, self.action_key, user):
            log.debug("Rejected %s: missing or invalid token", self.action_key)
            return False
        if not has_capability(user, self.capability, record):
            log.debug(
                "Rejected %s: user %s lacks %s", self.action_key, _user_ref(user), self.capability
            )
            return False
        return True
