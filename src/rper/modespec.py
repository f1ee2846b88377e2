"""Octal permission specification with per-group wildcards."""

import dataclasses

from rper import consts


class InvalidModeSpec(ValueError):
    """Mode specification string is not a valid 3-digit octal-with-wildcard value."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid octal value: {text} ({consts.MODE_SPEC_HINT})")
        self.text = text


@dataclasses.dataclass(frozen=True)
class ModeSpec:
    """Permission template for user, group and other.

    Each slot is an octal digit (0-7) that replaces the matching permission
    group, or None to keep the original bits of that group.
    """

    user: int | None
    group: int | None
    other: int | None

    def __post_init__(self) -> None:
        for slot in self.slots:
            if slot is not None and not 0 <= slot <= 7:  # noqa: PLR2004
                raise InvalidModeSpec(self.render())

    @classmethod
    def parse(cls, text: str) -> "ModeSpec":
        """Parse a mode string such as "755", "0644" or "6*4".

        A 4-character string is accepted only with a leading "0", which is
        dropped. Only the digits 4-7 and "*" are valid positions.
        """
        normalized = text[1:] if len(text) == 4 and text[0] == "0" else text  # noqa: PLR2004

        if len(normalized) != consts.MODE_SPEC_LENGTH or not set(normalized) <= consts.MODE_SPEC_ALPHABET:
            raise InvalidModeSpec(normalized)

        user, group, other = (None if c == consts.MODE_SPEC_WILDCARD else int(c) for c in normalized)
        return cls(user=user, group=group, other=other)

    @property
    def slots(self) -> tuple[int | None, int | None, int | None]:
        return (self.user, self.group, self.other)

    def apply(self, mode: int) -> int:
        """Return `mode` (masked to 9 bits) with every non-wildcard group replaced."""
        new_mode = mode & consts.PERMISSION_MASK
        for i, slot in enumerate(self.slots):
            if slot is None:
                continue
            shift = 6 - 3 * i
            new_mode &= ~(0o7 << shift)
            new_mode |= slot << shift
        return new_mode

    def render(self) -> str:
        """Display form, e.g. "6*4"."""
        return "".join(consts.MODE_SPEC_WILDCARD if slot is None else str(slot) for slot in self.slots)

    def __str__(self) -> str:
        return self.render()
