"""Process-wide registries: header includes used by types, and macros run on
open and close."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Hashable


class IncludeRegistry:
    """Maps argument types to the includes they need and tracks which are used.

    There is one registry per kind; obtain it with :meth:`instance`.
    """

    _instances: ClassVar[dict[Hashable, "IncludeRegistry"]] = {}

    def __init__(self) -> None:
        self._arg_include: dict[str, str] = {}
        self._arg_used: dict[str, bool] = {}

    @classmethod
    def instance(cls, kind: Hashable) -> "IncludeRegistry":
        """The single registry for the given kind."""
        return cls._instances.setdefault(kind, cls())

    def register(self, arg: str, include: str) -> None:
        """Record the include an argument type needs; the first registration wins."""
        if include == "":
            return
        self._arg_include.setdefault(arg, include)
        self._arg_used.setdefault(arg, False)

    def use_arg(self, arg: str) -> None:
        """Mark an argument type as used; unknown types are ignored."""
        if arg in self._arg_used:
            self._arg_used[arg] = True

    def includes(self) -> set[str]:
        """The distinct includes of every used argument type."""
        return {self._arg_include[arg] for arg, used in self._arg_used.items() if used}


@dataclass(frozen=True)
class Macro:
    """A named, described action."""

    name: str
    description: str
    func: Callable[[], object]

    def __call__(self) -> None:
        self.func()


class MacroCache:
    """An ordered collection of macros, one collection per policy.

    Typical policies are "open", "close" and "remove"; obtain a cache with
    :meth:`instance`.
    """

    _instances: ClassVar[dict[Hashable, "MacroCache"]] = {}

    def __init__(self) -> None:
        self._macros: list[Macro] = []

    @classmethod
    def instance(cls, policy: Hashable) -> "MacroCache":
        """The single cache for the given policy."""
        return cls._instances.setdefault(policy, cls())

    def register_macro(self, macro: Macro) -> None:
        self._macros.append(macro)

    def register(self, name: str, description: str, func: Callable[[], object]) -> Macro:
        """Wrap a callable as a macro, register it and return it."""
        macro = Macro(name, description, func)
        self.register_macro(macro)
        return macro

    def execute_macros(self) -> None:
        """Run every registered macro in registration order."""
        for macro in self._macros:
            macro()

    def __len__(self) -> int:
        return len(self._macros)