"""Polling helpers for waiting on eventually consistent listings.

GleSYS listings may lag behind a create or delete. A ConditionPoller
re-evaluates a Condition with a fixed delay until it holds or the attempt
budget runs out. The budget is attempts x delay, not a wall-clock deadline,
so a slow listing call stretches the real elapsed time beyond it.
"""

import logging
import time
from typing import Callable, Protocol

from glesysdns.exceptions import ConvergenceTimeout
from glesysdns.providers.dns.base import DomainRecordClient

logger = logging.getLogger(__name__)


class Condition(Protocol):
    """A check that is re-evaluated until it accepts the expected value.

    evaluate() must be safe to call repeatedly and must not mutate remote
    state.
    """

    def evaluate(self, expected: int) -> bool:
        ...


class DomainCount:
    """Holds when the account lists exactly the expected number of domains."""

    def __init__(self, client: DomainRecordClient):
        self.client = client

    def evaluate(self, expected: int) -> bool:
        return len(self.client.list_domains()) == expected

    def __repr__(self) -> str:
        return "DomainCount()"


class RecordCount:
    """Holds when a domain lists exactly the expected number of records."""

    def __init__(self, client: DomainRecordClient, domain_name: str):
        self.client = client
        self.domain_name = domain_name

    def evaluate(self, expected: int) -> bool:
        return len(self.client.list_records(self.domain_name)) == expected

    def __repr__(self) -> str:
        return f"RecordCount({self.domain_name!r})"


class ConditionPoller:
    """Re-evaluates a condition until it holds or the attempts run out."""

    def __init__(
        self,
        condition: Condition,
        max_attempts: int = 30,
        delay: float = 1.0,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize the poller.

        Args:
            condition: The condition to evaluate
            max_attempts: Total number of evaluations (at least 1)
            delay: Seconds to sleep between evaluations (0 busy-polls)
            sleep: Sleep function, time.sleep by default
        """
        if not isinstance(max_attempts, int) or isinstance(max_attempts, bool):
            raise ValueError(f"max_attempts must be an integer, got {max_attempts!r}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")

        self.condition = condition
        self.max_attempts = max_attempts
        self.delay = delay
        self._sleep = sleep or time.sleep

    def wait_for(self, expected: int) -> bool:
        """Wait until the condition accepts expected.

        Returns:
            True as soon as an evaluation holds, False once all attempts
            have failed. Errors raised by the condition propagate.
        """
        for attempt in range(1, self.max_attempts + 1):
            if self.condition.evaluate(expected):
                if attempt > 1:
                    logger.debug(
                        "%r reached %s on attempt %d/%d",
                        self.condition,
                        expected,
                        attempt,
                        self.max_attempts,
                    )
                return True

            if attempt < self.max_attempts:
                self._sleep(self.delay)

        logger.warning(
            "%r did not reach %s after %d attempts",
            self.condition,
            expected,
            self.max_attempts,
        )
        return False

    __call__ = wait_for

    def require(self, expected: int, description: str | None = None) -> None:
        """Like wait_for(), but raise ConvergenceTimeout on exhaustion."""
        if not self.wait_for(expected):
            what = description or repr(self.condition)
            raise ConvergenceTimeout(
                f"{what} did not reach {expected} after {self.max_attempts} attempts"
            )
