"""
agent_inbox.inbox.baseline

Baseline Snapshot

Holds the original, stringified argument values of an interrupt so that live
edits can be compared against them. Values are recorded once per key and are
never overwritten; the snapshot is only ever used for equality checks, never
as the source of the current values.

A snapshot belongs to one interrupt session and is discarded when the
interrupt closes.
"""

import json
from typing import Any, Dict, Iterator, List, Mapping

from agent_inbox.sentry import get_logger

logger = get_logger(__name__)


def stringify_arg_value(value: Any) -> str:
    """
    Stringify an argument value for baseline comparison.

    Strings are kept as-is; every other value is serialised as canonical JSON
    (sorted keys, compact separators) so that equal structures compare equal.

    Examples:
        >>> stringify_arg_value("NYC")
        'NYC'
        >>> stringify_arg_value({"b": 1, "a": [True, None]})
        '{"a":[true,null],"b":1}'
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)


class BaselineSnapshot(Mapping[str, str]):
    """Write-once mapping of argument key to its original stringified value."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BaselineSnapshot({self._values!r})"

    def record(self, key: str, value: Any) -> bool:
        """
        Record the baseline for ``key`` unless one already exists.

        A second record with a different value is a consistency fault: it means
        the descriptor changed under an open interrupt. The fault is logged and
        the first-seen value is kept.

        Returns:
            bool: True if the key was newly recorded
        """
        string_value = stringify_arg_value(value)

        if key not in self._values:
            self._values[key] = string_value
            return True

        if self._values[key] != string_value:
            logger.error(
                "[baseline] Value for key %s does not match the recorded baseline, keeping the original",
                key,
                extra={"key": key, "value": string_value, "expected_value": self._values[key]},
            )
        return False

    def record_all(self, args: Mapping[str, Any]) -> None:
        for key, value in args.items():
            self.record(key, value)

    def matches(self, key: str, value: Any) -> bool:
        """True if ``key`` has a baseline equal to the stringified ``value``."""
        return key in self._values and self._values[key] == stringify_arg_value(value)

    def changed_keys(self, args: Mapping[str, Any]) -> List[str]:
        """Keys of ``args`` that differ from, or are missing in, the baseline."""
        return [key for key, value in args.items() if not self.matches(key, value)]

    def clear(self) -> None:
        self._values = {}


def have_args_changed(args: Mapping[str, Any], baseline: BaselineSnapshot) -> bool:
    """Whether any argument differs from its baseline value."""
    return bool(baseline.changed_keys(args))
