# streamauth/services/registration/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SignupIn:
    """
    Input DTO for local account signup.

    :param email: Email as submitted (normalized by the model).
    :type email: str
    :param password: Raw password, checked against the composition policy.
    :type password: str
    :param nickname: Optional display name.
    :type nickname: str | None
    """

    email: str
    password: str
    nickname: str | None = None
