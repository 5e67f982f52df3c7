"""
Mode objects for user-configurable switches.

Provides the Mode base class with its two variants, ListMode and BooleanMode,
and the M() constructor that picks a variant from the shape of its arguments.
"""
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Hashable, Iterable, Iterator, Optional

from .constants import (
    BOOLEAN_LABEL,
    DESCRIPTION_SEPARATOR,
    FALSE_WORDS,
    LABEL_SEPARATOR,
    MIN_LIST_LENGTH,
    OFF_VALUE,
    ON_VALUE,
    TRUE_WORDS,
)
from .errors import (
    InvalidOperationError,
    ModeConstructionError,
    ModeTypeError,
    UnrecognizedValueError,
    describe_shape,
)


logger = logging.getLogger(__name__)

# Field names readable through Mode.get(), matched case-insensitively
READABLE_FIELDS = frozenset({"current", "value", "description"})

# Keys accepted when a list mode is built from a mapping
MAPPING_KEYS = frozenset({"values", "description"})


class ModeKind(str, Enum):
    """Which variant a Mode is. Fixed at construction."""

    LIST = "list"
    BOOLEAN = "boolean"


def _check_description(description: Any, allow_none: bool = True) -> Optional[str]:
    if description is None and allow_none:
        return None
    if not isinstance(description, str):
        raise ModeTypeError(
            f"Mode description must be a string, got {type(description).__name__}"
        )
    return description


class Mode(ABC):
    """A named, stateful switch that is either a list of labels or a toggle.

    Modes are created once and then mutated in place. Every mutator returns
    the mode's ``current`` value after it runs, so callers can chain a
    change and a lookup in one expression.

    Use the named constructors when the kind is known up front, or M() when
    it should be inferred from the arguments.

    Example:
        melee = Mode.from_labels(["Normal", "Acc", "Att"], "Melee Mode")
        melee.cycle()        # "Acc"
        melee.set("att")     # "Att"
        melee.reset()        # "Normal"

        luzaf = Mode.boolean()
        luzaf.toggle()       # True
        luzaf.value          # "on"
    """

    kind: ModeKind

    def __init__(self, description: Optional[str] = None) -> None:
        self._description = _check_description(description)

    @staticmethod
    def from_labels(labels: Iterable[Hashable], description: Optional[str] = None) -> "ListMode":
        """Create a list mode whose first label is the default."""
        return ListMode(labels, description)

    @staticmethod
    def boolean(default: bool = False, description: Optional[str] = None) -> "BooleanMode":
        """Create a boolean mode, off unless ``default`` is True."""
        return BooleanMode(default, description)

    @property
    def description(self) -> Optional[str]:
        """The description text, or None if never set."""
        return self._description

    @property
    @abstractmethod
    def current(self) -> Any:
        """The live value: a bool for boolean modes, a label for list modes."""

    @property
    def value(self) -> Any:
        """The current value as it should be read by name-keyed lookups."""
        return self.current

    @property
    @abstractmethod
    def default(self) -> Any:
        """The value reset() returns to."""

    @abstractmethod
    def cycle(self) -> Any:
        """Advance to the next value."""

    @abstractmethod
    def cycleback(self) -> Any:
        """Step back to the previous value."""

    @abstractmethod
    def toggle(self) -> Any:
        """Flip a boolean mode."""

    @abstractmethod
    def set(self, val: Any) -> Any:
        """Select a value by name or by literal."""

    @abstractmethod
    def reset(self) -> Any:
        """Return to the default value."""

    @abstractmethod
    def _render_options(self) -> str:
        """Render the kind-specific middle part of str(mode)."""

    def describe(self, text: str) -> Any:
        """Set the description.

        Args:
            text: New description text.

        Returns:
            The current value, unchanged.

        Raises:
            ModeTypeError: If text is not a string.
        """
        self._description = _check_description(text, allow_none=False)
        logger.debug(f"Described {self.kind.value} mode as {text!r}")
        return self.current

    def get(self, name: str) -> Any:
        """Read a field by name, ignoring case.

        Args:
            name: One of "current", "value" or "description" in any case.

        Returns:
            The field's value.

        Raises:
            AttributeError: If name is not a readable field.
        """
        key = name.lower() if isinstance(name, str) else None
        if key not in READABLE_FIELDS:
            raise AttributeError(f"Mode has no readable field {name!r}")
        return getattr(self, key)

    def __str__(self) -> str:
        res = ""
        if self._description:
            res = self._description + DESCRIPTION_SEPARATOR
        return f"{res}{self._render_options()} ({self.current})"

    def __rich__(self):
        from .display import mode_text

        return mode_text(self)


class ListMode(Mode):
    """A mode that selects one label from a fixed, ordered list.

    Positions are 0-based: ``mode[0]`` is the first label and the default.
    The label list never changes after construction.

    Attributes:
        kind: Always ModeKind.LIST.
    """

    kind = ModeKind.LIST

    def __init__(self, labels: Iterable[Hashable], description: Optional[str] = None) -> None:
        if isinstance(labels, (str, bytes)) or isinstance(labels, Mapping):
            raise ModeConstructionError(
                "List mode labels must be an ordered collection",
                type(labels).__name__,
            )
        try:
            values = tuple(labels)
        except TypeError:
            raise ModeConstructionError(
                "List mode labels must be an ordered collection",
                type(labels).__name__,
            ) from None

        # Later duplicates overwrite earlier ones
        lookup: dict[Hashable, int] = {}
        for index, label in enumerate(values):
            try:
                lookup[label] = index
            except TypeError:
                raise ModeConstructionError(
                    "List mode labels must be hashable",
                    type(label).__name__,
                ) from None

        if len(lookup) < MIN_LIST_LENGTH:
            raise ModeConstructionError(
                f"List mode needs at least {MIN_LIST_LENGTH} distinct labels",
                f"{len(lookup)} distinct label(s)",
            )

        super().__init__(description)
        self._values = values
        self._lookup = lookup
        self._index = 0
        logger.debug(f"Created list mode with {len(values)} labels: {values!r}")

    @property
    def values(self) -> tuple:
        """All labels, in order."""
        return self._values

    @property
    def current_index(self) -> int:
        """Position of the current label."""
        return self._index

    @property
    def default_index(self) -> int:
        """Position of the default label. Always 0."""
        return 0

    @property
    def current(self) -> Hashable:
        return self._values[self._index]

    @property
    def default(self) -> Hashable:
        return self._values[0]

    def index_of(self, label: Hashable) -> int:
        """Look up the position of an exact label.

        Raises:
            UnrecognizedValueError: If the label is not in the list.
        """
        index = self._find(label)
        if index is None:
            raise UnrecognizedValueError(f"Unknown mode value: {label!r}", label)
        return index

    def cycle(self) -> Hashable:
        """Move to the next label, wrapping from the last to the first."""
        self._index = (self._index + 1) % len(self._values)
        logger.debug(f"Cycled list mode to {self.current!r}")
        return self.current

    def cycleback(self) -> Hashable:
        """Move to the previous label, wrapping from the first to the last."""
        self._index = (self._index - 1) % len(self._values)
        logger.debug(f"Cycled list mode back to {self.current!r}")
        return self.current

    def toggle(self) -> Hashable:
        raise InvalidOperationError("Cannot toggle a list mode.", "toggle")

    def set(self, val: Hashable) -> Hashable:
        """Select a label.

        An exact match wins. Failing that, string values are compared
        against string labels ignoring case and the first match is taken.

        Args:
            val: The label to select.

        Returns:
            The newly selected label.

        Raises:
            UnrecognizedValueError: If no label matches.
        """
        index = self._find(val)

        if index is None and isinstance(val, str):
            folded = val.lower()
            for position, label in enumerate(self._values):
                if isinstance(label, str) and label.lower() == folded:
                    index = position
                    break

        if index is None:
            raise UnrecognizedValueError(f"Unknown mode value: {val!r}", val)

        self._index = index
        logger.debug(f"Set list mode to {self.current!r}")
        return self.current

    def reset(self) -> Hashable:
        self._index = 0
        logger.debug(f"Reset list mode to {self.current!r}")
        return self.current

    def _find(self, label: Any) -> Optional[int]:
        try:
            return self._lookup.get(label)
        except TypeError:
            # Unhashable values cannot be labels
            return None

    def _render_options(self) -> str:
        return "{" + LABEL_SEPARATOR.join(str(label) for label in self._values) + "}"

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._values)

    def __contains__(self, label: object) -> bool:
        return self._find(label) is not None

    def __repr__(self) -> str:
        return (
            f"<ListMode {self._render_options()} "
            f"current={self.current!r} index={self._index}>"
        )


class BooleanMode(Mode):
    """A two-valued toggle.

    ``current`` is a bool; ``value`` renders it as "on" or "off".

    Attributes:
        kind: Always ModeKind.BOOLEAN.
    """

    kind = ModeKind.BOOLEAN

    def __init__(self, default: bool = False, description: Optional[str] = None) -> None:
        if not isinstance(default, bool):
            raise ModeConstructionError(
                "Boolean mode default must be a bool",
                type(default).__name__,
            )
        super().__init__(description)
        self._default = default
        self._current = default
        logger.debug(f"Created boolean mode defaulting to {default}")

    @property
    def current(self) -> bool:
        return self._current

    @property
    def value(self) -> str:
        return ON_VALUE if self._current else OFF_VALUE

    @property
    def default(self) -> bool:
        return self._default

    def cycle(self) -> bool:
        return self.toggle()

    def cycleback(self) -> bool:
        return self.toggle()

    def toggle(self) -> bool:
        self._current = not self._current
        logger.debug(f"Toggled boolean mode to {self._current}")
        return self._current

    def set(self, val: Any) -> bool:
        """Set the toggle from a bool or one of on/off/true/false.

        Strings are matched ignoring case.

        Raises:
            UnrecognizedValueError: For any other string or type.
        """
        if isinstance(val, bool):
            self._current = val
        elif isinstance(val, str):
            folded = val.lower()
            if folded in TRUE_WORDS:
                self._current = True
            elif folded in FALSE_WORDS:
                self._current = False
            else:
                raise UnrecognizedValueError(f"Unrecognized value: {val}", val)
        else:
            raise UnrecognizedValueError(
                f"Unrecognized value type: {type(val).__name__}", val
            )

        logger.debug(f"Set boolean mode to {self._current}")
        return self._current

    def reset(self) -> bool:
        self._current = self._default
        logger.debug(f"Reset boolean mode to {self._current}")
        return self._current

    def _render_options(self) -> str:
        return BOOLEAN_LABEL

    def __repr__(self) -> str:
        return f"<BooleanMode current={self._current} default={self._default}>"


def M(*args: Any) -> Mode:
    """Build a mode, inferring its kind from the arguments.

    Accepted shapes, checked in order:

    - ``M(["Normal", "Acc"])`` or ``M("Normal", "Acc")``: a list mode. A
      mapping ``{"values": [...], "description": "..."}`` also works and is
      the only way to attach a description here.
    - ``M()`` or ``M(None)``: a boolean mode, off.
    - ``M(False)`` or ``M(True)``, optionally followed by a description
      string: a boolean mode.
    - ``M("Use Luzaf Ring")``: a boolean mode, off, described by the string.

    Args:
        *args: Labels, a label collection, or a boolean default.

    Returns:
        A ListMode or BooleanMode.

    Raises:
        ModeConstructionError: If the arguments match none of the shapes or
            a list has fewer than two labels.
    """
    if not args or (len(args) == 1 and args[0] is None):
        return BooleanMode()

    first, rest = args[0], args[1:]

    if isinstance(first, str):
        if not rest:
            return BooleanMode(False, first)
        if all(isinstance(arg, str) for arg in rest):
            return ListMode(args)
        raise ModeConstructionError(
            "Positional labels must all be strings", describe_shape(args)
        )

    if isinstance(first, bool):
        if not rest:
            return BooleanMode(first)
        if len(rest) == 1 and isinstance(rest[0], str):
            return BooleanMode(first, rest[0])
        raise ModeConstructionError(
            "A boolean mode takes at most one description string", describe_shape(args)
        )

    if rest:
        raise ModeConstructionError("Unrecognized mode arguments", describe_shape(args))

    if isinstance(first, Mapping):
        return _from_mapping(first)

    if isinstance(first, (Sequence, ListMode)) and not isinstance(first, bytes):
        return ListMode(first)

    raise ModeConstructionError("Unrecognized mode arguments", describe_shape(args))


def _from_mapping(data: Mapping) -> ListMode:
    unknown = set(data) - MAPPING_KEYS
    if unknown:
        raise ModeConstructionError(
            f"Unknown mode fields: {', '.join(sorted(map(str, unknown)))}",
            type(data).__name__,
        )
    if "values" not in data:
        raise ModeConstructionError("Missing required field: 'values'", type(data).__name__)

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ModeConstructionError(
            "Field 'description' must be a string", type(description).__name__
        )
    return ListMode(data["values"], description)
