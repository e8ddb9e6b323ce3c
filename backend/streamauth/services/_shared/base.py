# streamauth/services/_shared/base.py
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from streamauth.services._shared.ports import utcnow


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (request ids, client address).

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Client address as seen after proxy handling.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Own the clock so time-dependent rules are testable without patching.
    * Provide a per-service logger.
    * Keep services framework-agnostic: no Flask, no HTTP.
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context.
        :type ctx: ServiceContext | None
        :param clock: Callable returning timezone-aware "now".
        :type clock: Callable[[], datetime] | None
        """
        self.ctx = ctx or ServiceContext()
        self.clock = clock or utcnow
        self.log = logging.getLogger(type(self).__module__)

    def now_utc(self) -> datetime:
        """Return the service clock's current instant."""
        return self.clock()
