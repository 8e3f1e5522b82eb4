"""Common interfaces shared by the result types.

Anything exposing the three message collections can be handed to the bulk
``with_*`` operations and to ``merge``.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSource(Protocol):
    """Read-only view over errors, successes and messages.

    Both Result and ValueResult implement this protocol.

    Example:
        source: MessageSource = ValueResult.create().add_error("Timeout")
        Result.create().merge(source)
    """

    @property
    def errors(self) -> tuple[str | None, ...]: ...

    @property
    def successes(self) -> tuple[str | None, ...]: ...

    @property
    def messages(self) -> tuple[str | None, ...]: ...
