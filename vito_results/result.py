"""Outcome of an operation: a success flag plus errors, successes and messages.

Result is a mutable fluent builder. Every mutating method returns the same
instance so calls can be chained:

    result = (
        Result.create()
        .add_success("Saved")
        .add_message("  took   2 retries  ")
    )
    result.messages  # ("took 2 retries",)

Instances are not safe for concurrent mutation. Callers sharing one across
threads must synchronize access themselves.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from vito_results.config import MessagePolicySettings, get_settings
from vito_results.protocols import MessageSource
from vito_results.snapshot import ResultSnapshot
from vito_results.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "MessagePolicy",
    "Result",
    "prepare_value",
]

Entries = Iterable[str | None] | MessageSource | None


def prepare_value(value: str | None) -> str | None:
    """Normalize a message.

    Strips surrounding whitespace and collapses runs of spaces into a single
    space. Empty or whitespace-only input becomes None.

    Args:
        value: Message text, possibly None

    Returns:
        Normalized text, or None when nothing meaningful is left
    """
    if value is None:
        return None

    value = value.strip()
    if not value:
        return None

    while "  " in value:
        value = value.replace("  ", " ")

    return value


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class MessagePolicy:
    """Cleaning and filtering rules shared by all three collections.

    Attributes:
        clean_messages: Normalize every added string with prepare_value()
        ignore_empty_messages: Drop None, empty and whitespace-only strings
        remove_duplicate_messages: Drop strings already in the target collection
    """

    clean_messages: bool = True
    ignore_empty_messages: bool = True
    remove_duplicate_messages: bool = True

    @classmethod
    def from_settings(
        cls, settings: MessagePolicySettings | None = None
    ) -> "MessagePolicy":
        """Build a policy from settings (the global settings when omitted)."""
        if settings is None:
            settings = get_settings().messages
        return cls(
            clean_messages=settings.clean_messages,
            ignore_empty_messages=settings.ignore_empty_messages,
            remove_duplicate_messages=settings.remove_duplicate_messages,
        )


class Result:
    """Success/failure flag plus three ordered collections of messages.

    The result starts out succeeding. Adding an error marks it as failed for
    the rest of its life; nothing turns it back into a success.

    Policy changes only affect messages added afterwards. Entries already
    stored are never reprocessed.
    """

    prepare_value = staticmethod(prepare_value)

    def __init__(self, policy: MessagePolicy | None = None):
        self._succeeded = True
        self._policy = policy or MessagePolicy()
        self._errors: list[str | None] = []
        self._successes: list[str | None] = []
        self._messages: list[str | None] = []

    @classmethod
    def create(cls) -> "Result":
        """Create an empty, succeeding result with every policy flag enabled."""
        return cls()

    @classmethod
    def from_settings(cls, settings: MessagePolicySettings | None = None) -> "Result":
        """Create an empty result whose policy comes from configuration."""
        return cls(MessagePolicy.from_settings(settings))

    # ============================================================================
    # State
    # ============================================================================

    @property
    def succeeded(self) -> bool:
        return self._succeeded

    @property
    def failed(self) -> bool:
        return not self._succeeded

    @property
    def errors(self) -> tuple[str | None, ...]:
        return tuple(self._errors)

    @property
    def successes(self) -> tuple[str | None, ...]:
        return tuple(self._successes)

    @property
    def messages(self) -> tuple[str | None, ...]:
        return tuple(self._messages)

    @property
    def policy(self) -> MessagePolicy:
        return self._policy

    # ============================================================================
    # Configuration
    # ============================================================================

    def set_clean_messages(self, enabled: bool) -> "Result":
        self._policy = replace(self._policy, clean_messages=enabled)
        return self

    def set_ignore_empty_messages(self, enabled: bool) -> "Result":
        self._policy = replace(self._policy, ignore_empty_messages=enabled)
        return self

    def set_remove_duplicate_messages(self, enabled: bool) -> "Result":
        self._policy = replace(self._policy, remove_duplicate_messages=enabled)
        return self

    def with_policy(self, policy: MessagePolicy) -> "Result":
        """Replace all three policy flags at once.

        Args:
            policy: Policy applied to subsequent add operations

        Returns:
            Self for method chaining
        """
        self._policy = policy
        return self

    # ============================================================================
    # Adding messages
    # ============================================================================

    def _append(self, target: list[str | None], value: str | None) -> None:
        if self._policy.clean_messages:
            value = prepare_value(value)

        if self._policy.ignore_empty_messages and _is_blank(value):
            return

        if self._policy.remove_duplicate_messages and value in target:
            return

        target.append(value)

    def add_error(self, error: str | None) -> "Result":
        """Record an error and mark the result as failed.

        The result fails even when the text itself is filtered out as empty
        or duplicate.

        Args:
            error: Error text, possibly None

        Returns:
            Self for method chaining
        """
        self._succeeded = False
        self._append(self._errors, error)
        return self

    def add_success(self, success: str | None) -> "Result":
        self._append(self._successes, success)
        return self

    def add_message(self, message: str | None) -> "Result":
        self._append(self._messages, message)
        return self

    @staticmethod
    def _entries(items: Entries, collection: str) -> Iterable[str | None]:
        if items is None:
            return ()
        if isinstance(items, str):
            return (items,)
        if isinstance(items, MessageSource):
            return getattr(items, collection)
        return items

    def with_errors(self, errors: Entries) -> "Result":
        """Add each error in order.

        Args:
            errors: Iterable of error strings, a single string (added as
                one entry), or another result whose errors are copied

        Returns:
            Self for method chaining
        """
        for error in self._entries(errors, "errors"):
            self.add_error(error)
        return self

    def with_successes(self, successes: Entries) -> "Result":
        """Add each success in order (see with_errors)."""
        for success in self._entries(successes, "successes"):
            self.add_success(success)
        return self

    def with_messages(self, messages: Entries) -> "Result":
        """Add each message in order (see with_errors)."""
        for message in self._entries(messages, "messages"):
            self.add_message(message)
        return self

    def merge(self, other: MessageSource) -> "Result":
        """Append another result's errors, successes and messages.

        Entries go through this result's policy, not the donor's. Merging a
        failed result fails this one as soon as one of its errors is added.

        Args:
            other: Result (or ValueResult) to copy from

        Returns:
            Self for method chaining
        """
        logger.debug(
            "Merging result",
            errors=len(other.errors),
            successes=len(other.successes),
            messages=len(other.messages),
        )
        self.with_errors(other.errors)
        self.with_successes(other.successes)
        self.with_messages(other.messages)
        return self

    # ============================================================================
    # Snapshots
    # ============================================================================

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "succeeded": self.succeeded,
            "failed": self.failed,
            "errors": list(self._errors),
            "successes": list(self._successes),
            "messages": list(self._messages),
        }

    def _restore(self, snapshot: ResultSnapshot) -> None:
        self.with_errors(snapshot.errors)
        self.with_successes(snapshot.successes)
        self.with_messages(snapshot.messages)
        if not snapshot.succeeded:
            self._succeeded = False

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], policy: MessagePolicy | None = None
    ) -> "Result":
        """Rebuild a result from a dictionary written by to_dict().

        Entries are replayed through the add operations, so the given policy
        cleans, filters and de-duplicates them like live messages.

        Args:
            data: Mapping with succeeded/errors/successes/messages keys
            policy: Policy used while replaying (all flags enabled if omitted)

        Returns:
            New Result

        Raises:
            pydantic.ValidationError: If the mapping is malformed
        """
        snapshot = ResultSnapshot.model_validate(data)
        result = cls(policy)
        result._restore(snapshot)
        logger.debug("Restored result", succeeded=result.succeeded)
        return result

    def __bool__(self) -> bool:
        return self._succeeded

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(succeeded={self._succeeded}, "
            f"errors={len(self._errors)}, successes={len(self._successes)}, "
            f"messages={len(self._messages)})"
        )
