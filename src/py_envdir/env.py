"""Environment lists — variables loaded from an envdir.

Every Unix process carries an environment: a block of ``KEY=VALUE``
strings inherited from its parent.  An *envdir* is a directory that
describes extra entries on disk, one file per variable, and an
``EnvironmentList`` is what we build from it before starting a child.

Key design properties:
    - **Fresh per run** — a list is built from the directory each time
      and thrown away once the command finishes.
    - **Strings only** — both keys and values are strings.
    - **Append, then apply** — the child's block is the inherited
      entries followed by ours; applying it in order means the last
      entry for a name wins, so envdir values override inherited ones.
"""

from collections.abc import Mapping


class EnvironmentList:
    """A key-value store for variables read from an envdir."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create an environment list, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def stringify(self) -> list[str]:
        """Return the entries as ``KEY=VALUE`` strings, in insertion order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def merged_into(self, base: Mapping[str, str]) -> dict[str, str]:
        """Build a complete process environment from *base* plus this list.

        Both sides are serialised to ``KEY=VALUE`` and concatenated,
        *base* first.  Each entry is then split at its first ``=`` and
        applied in order; nothing is deduplicated up front.

        Args:
            base: The inherited environment, usually ``os.environ``.

        Returns:
            A new dict suitable for ``subprocess``'s ``env`` argument.

        """
        block = [f"{key}={value}" for key, value in base.items()]
        block.extend(self.stringify())
        merged: dict[str, str] = {}
        for entry in block:
            key, _, value = entry.partition("=")
            merged[key] = value
        return merged

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set."""
        return key in self._vars

    def __eq__(self, other: object) -> bool:
        """Compare by contents; plain dicts compare equal too."""
        if isinstance(other, EnvironmentList):
            return self._vars == other._vars
        if isinstance(other, dict):
            return self._vars == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
