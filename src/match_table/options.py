"""
Match options for re_exec.
Selects the regex dialect and the engine flags applied to the pattern.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from .errors import InvalidArgument


@dataclass
class MatchOptions:
    """Regex dialect and flags for one re_exec call."""
    perl: bool = True
    ignore_case: bool = False
    fixed: bool = False
    multiline: bool = False
    dotall: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchOptions':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgument(f"Unknown match option(s): {', '.join(unknown)}")
        return cls(**data)

    def flags_for(self, module) -> int:
        """
        Combine the boolean options into flag bits of the given engine module.

        Args:
            module: The 're' or 'regex' module
        """
        flags = 0
        if self.ignore_case:
            flags |= module.IGNORECASE
        if self.multiline:
            flags |= module.MULTILINE
        if self.dotall:
            flags |= module.DOTALL
        return flags
