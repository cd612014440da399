import dataclasses
import enum
import io
from collections.abc import Iterable, Iterator

Config = dict[str, dict[str, str | None]]

# Characters that start a comment when outside of a quoted span.
COMMENT_CHARS = ";#"

# Only ASCII whitespace is trimmed, unlike str.strip() which also removes Unicode spaces.
WHITESPACE = " \t\n\r\v\f"


class Kind(enum.Enum):
    """How a line was classified."""

    EMPTY = enum.auto()
    SECTION = enum.auto()
    PROPERTY = enum.auto()
    KEY_ONLY = enum.auto()
    VALUE_ONLY = enum.auto()


@dataclasses.dataclass(frozen=True, slots=True)
class ParseResult:
    """The classification of a single INI line.

    Empty names and values are never stored: they are normalized to None,
    so a key with an empty value looks the same as a key without one.

    Attributes:
        section: The section name if the line was a header, i.e. [name].
        key: The key of a key=value line.
        value: The value of a key=value line.
    """

    section: str | None = None
    key: str | None = None
    value: str | None = None

    @property
    def kind(self) -> Kind:
        if self.section is not None:
            return Kind.SECTION

        if self.key is not None:
            return Kind.PROPERTY if self.value is not None else Kind.KEY_ONLY

        if self.value is not None:
            return Kind.VALUE_ONLY

        return Kind.EMPTY

    def __bool__(self) -> bool:
        return self.kind is not Kind.EMPTY


def strip_comment(line: str) -> str:
    """Remove a trailing comment and newline from a line.

    A comment starts at the first ';' or '#' that is not inside double quotes.
    The quotes themselves are left alone.

    Args:
        line: The line to strip.

    Returns:
        The line without its comment and without a single trailing newline.
    """

    quoted = False

    for i, char in enumerate(line):
        if char == '"':
            quoted = not quoted
        elif char in COMMENT_CHARS and not quoted:
            line = line[:i]
            break

    return line.removesuffix("\n")


def _trim(text: str) -> str | None:
    # Empty strings are normalized to None.
    return text.strip(WHITESPACE) or None


def parse(line: str) -> ParseResult:
    """Parse an INI line.

    Malformed lines (a '[' without a matching ']', or text without '=') are not errors,
    they just parse to an empty result.

    Args:
        line: The line to parse. It may still end in a newline.

    Returns:
        The classification of the line.

    Raises:
        TypeError: line is None.
    """

    if line is None:
        raise TypeError("parse() must not be called with None")

    line = strip_comment(line).strip(WHITESPACE)

    # Blank lines and whole-line comments.
    if not line:
        return ParseResult()

    if line[0] == "[":
        end = line.find("]")
        if end == -1:
            # A dangling bracket is dropped, even if the line also contains '='.
            return ParseResult()

        return ParseResult(section=_trim(line[1:end]))

    key, sep, value = line.partition("=")
    if not sep:
        return ParseResult()

    return ParseResult(key=_trim(key), value=_trim(value))


def iterparse(lines: Iterable[str]) -> Iterator[tuple[int, ParseResult]]:
    """Parse lines one by one.

    Args:
        lines: The lines to parse.

    Yields:
        Tuples of the line number (starting from 1) and the line's classification.
    """

    for n, line in enumerate(lines, start=1):
        yield n, parse(line)


def load(lines: Iterable[str], default_section: str = "DEFAULT") -> Config:
    """Parse INI lines into a dictionary of sections.

    Properties are put into the most recent section.
    Keys without a value are mapped to None, and values without a key are skipped.

    Args:
        lines: The lines to parse.
        default_section: The section to put properties in if no sections are specified.
            Defaults to "DEFAULT".

    Returns:
        A dictionary of sections mapped to their properties.
    """

    config: Config = {}
    section = default_section

    for _, result in iterparse(lines):
        match result.kind:
            case Kind.SECTION:
                section = result.section
                config.setdefault(section, {})
            case Kind.PROPERTY | Kind.KEY_ONLY:
                config.setdefault(section, {})[result.key] = result.value

    return config


def loads(text: str, **kwargs) -> Config:
    """Parse an INI text.

    Args:
        text: The text to parse.
        **kwargs: Passed to load().

    Returns:
        See load().
    """

    # Only \n ends a line, the same as when reading from a file.
    return load(io.StringIO(text, newline="\n"), **kwargs)
