"""Result carrying a typed payload that is only kept while succeeding."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from vito_results.config import MessagePolicySettings
from vito_results.protocols import MessageSource
from vito_results.result import Entries, MessagePolicy, Result, prepare_value
from vito_results.snapshot import ValueResultSnapshot
from vito_results.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ValueResult(Generic[T]):
    """A Result plus an optional value.

    Message handling is delegated to a wrapped Result; every forwarded method
    returns this ValueResult so chains keep their type:

        result = ValueResult[str].create().with_value("Hello").add_success("OK")
        result.value  # "Hello"

    The value can only be set while the result is succeeding. Setting it on a
    failed result does nothing.

    Not safe for concurrent mutation without external synchronization.
    """

    prepare_value = staticmethod(prepare_value)

    def __init__(self, policy: MessagePolicy | None = None):
        self._result = Result(policy)
        self._value: T | None = None

    @classmethod
    def create(cls) -> "ValueResult[T]":
        return cls()

    @classmethod
    def from_settings(
        cls, settings: MessagePolicySettings | None = None
    ) -> "ValueResult[T]":
        return cls(MessagePolicy.from_settings(settings))

    @property
    def succeeded(self) -> bool:
        return self._result.succeeded

    @property
    def failed(self) -> bool:
        return self._result.failed

    @property
    def errors(self) -> tuple[str | None, ...]:
        return self._result.errors

    @property
    def successes(self) -> tuple[str | None, ...]:
        return self._result.successes

    @property
    def messages(self) -> tuple[str | None, ...]:
        return self._result.messages

    @property
    def policy(self) -> MessagePolicy:
        return self._result.policy

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value is not None

    def set_clean_messages(self, enabled: bool) -> "ValueResult[T]":
        self._result.set_clean_messages(enabled)
        return self

    def set_ignore_empty_messages(self, enabled: bool) -> "ValueResult[T]":
        self._result.set_ignore_empty_messages(enabled)
        return self

    def set_remove_duplicate_messages(self, enabled: bool) -> "ValueResult[T]":
        self._result.set_remove_duplicate_messages(enabled)
        return self

    def with_policy(self, policy: MessagePolicy) -> "ValueResult[T]":
        self._result.with_policy(policy)
        return self

    def add_error(self, error: str | None) -> "ValueResult[T]":
        self._result.add_error(error)
        return self

    def add_success(self, success: str | None) -> "ValueResult[T]":
        self._result.add_success(success)
        return self

    def add_message(self, message: str | None) -> "ValueResult[T]":
        self._result.add_message(message)
        return self

    def with_errors(self, errors: Entries) -> "ValueResult[T]":
        self._result.with_errors(errors)
        return self

    def with_successes(self, successes: Entries) -> "ValueResult[T]":
        self._result.with_successes(successes)
        return self

    def with_messages(self, messages: Entries) -> "ValueResult[T]":
        self._result.with_messages(messages)
        return self

    def with_value(self, value: T | None) -> "ValueResult[T]":
        """Set the payload if the result is still succeeding.

        Args:
            value: Payload to keep

        Returns:
            Self for method chaining
        """
        if self._result.succeeded:
            self._value = value
        return self

    def merge(self, other: MessageSource) -> "ValueResult[T]":
        """Merge another result's messages, then adopt its value.

        The value is only adopted when ``other`` is a ValueResult holding one
        and this result is still succeeding after ``other``'s errors were
        merged.

        Args:
            other: Result or ValueResult to copy from

        Returns:
            Self for method chaining
        """
        self._result.merge(other)

        if isinstance(other, ValueResult) and other.has_value:
            self.with_value(other.value)

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = self._result.to_dict()
        data["has_value"] = self.has_value
        data["value"] = self._value
        return data

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], policy: MessagePolicy | None = None
    ) -> "ValueResult[T]":
        """Rebuild a value result from a dictionary written by to_dict().

        Messages are replayed like Result.from_dict(). The value is restored
        through with_value(), so a failed snapshot never carries one.

        Raises:
            pydantic.ValidationError: If the mapping is malformed
        """
        snapshot = ValueResultSnapshot.model_validate(data)
        result = cls(policy)
        result._result._restore(snapshot)
        result.with_value(snapshot.value)
        logger.debug(
            "Restored value result",
            succeeded=result.succeeded,
            has_value=result.has_value,
        )
        return result

    def __bool__(self) -> bool:
        return self._result.succeeded

    def __repr__(self) -> str:
        return (
            f"ValueResult(succeeded={self.succeeded}, has_value={self.has_value}, "
            f"errors={len(self.errors)}, successes={len(self.successes)}, "
            f"messages={len(self.messages)})"
        )
