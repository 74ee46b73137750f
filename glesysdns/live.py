"""Fixture context for running scenarios against a live account."""

import logging
from typing import Callable

from glesysdns.config import PollingConfig
from glesysdns.exceptions import RemoteCallFailure
from glesysdns.predicates import ConditionPoller, DomainCount, RecordCount
from glesysdns.providers.dns.base import DomainRecordClient

logger = logging.getLogger(__name__)


def live_domain_name(identity: str, domain_suffix: str) -> str:
    """Name of the throwaway domain used for an account's live run."""
    return f"{identity.lower()}-domain.{domain_suffix}"


class LiveDomainContext:
    """Owns the test domain and the pollers for one live run.

    Build one per run and pass it to each scenario. setup() replaces any
    leftover domain with a fresh one; teardown() removes it and waits for
    the domain listing to shrink.
    """

    def __init__(
        self,
        client: DomainRecordClient,
        identity: str,
        polling: PollingConfig | None = None,
        domain_suffix: str = "jclouds.org",
        sleep: Callable[[float], None] | None = None,
    ):
        polling = polling or PollingConfig()
        poller_kwargs = {
            "max_attempts": polling.attempts,
            "delay": polling.delay,
            "sleep": sleep,
        }

        self.client = client
        self.domain_name = live_domain_name(identity, domain_suffix)
        self.domain_counter = ConditionPoller(DomainCount(client), **poller_kwargs)
        self.record_counter = ConditionPoller(
            RecordCount(client, self.domain_name), **poller_kwargs
        )

    def setup(self) -> None:
        """Create a fresh test domain, removing a leftover one first."""
        try:
            self.client.delete_domain(self.domain_name)
        except RemoteCallFailure as e:
            # Usually the domain is simply absent
            logger.debug("Ignoring cleanup failure for %s: %s", self.domain_name, e)

        self.client.add_domain(self.domain_name)
        logger.info("Created test domain %s", self.domain_name)

    def teardown(self) -> bool:
        """Delete the test domain and wait for the listing to reflect it."""
        before = len(self.client.list_domains())
        self.client.delete_domain(self.domain_name)
        logger.info("Deleted test domain %s", self.domain_name)
        return self.domain_counter.wait_for(before - 1)

    def __enter__(self) -> "LiveDomainContext":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.teardown():
            logger.warning(
                "Domain listing did not converge after deleting %s", self.domain_name
            )
