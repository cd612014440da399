import logging
import pathlib
from collections.abc import Iterable, Iterator

import attrs
import chardet

from .exceptions import EncodingError, LineTooLongError

DEFAULT_ENCODING = "utf_8"

_log = logging.getLogger(__name__)


@attrs.define(frozen=True)
class ReaderSettings:
    """How INI files are read.

    Attributes:
        encoding: The file encoding. If None, encoding detection is attempted.
        max_line_length: The longest line allowed in characters, excluding the newline.
            If None, lines may be of any length.
    """

    encoding: str | None = None
    max_line_length: int | None = attrs.field(
        default=None,
        validator=attrs.validators.optional(
            attrs.validators.and_(
                attrs.validators.instance_of(int), attrs.validators.gt(0)
            )
        ),
    )


def detect_encoding(file: Iterable[bytes]) -> str | None:
    """Determine the encoding of a binary file.

    A windows-1252 guess is not remapped to Shift-JIS: that only helps tiny Japanese files,
    and INI files are just as often in a Western code page.

    Args:
        file: The file to detect the encoding of.

    Returns:
        The encoding if detected successfully, otherwise None.
        Empty input is never detected, whatever chardet guesses for it.
    """

    detector = chardet.UniversalDetector()
    fed = False

    for line in file:
        if not detector.done:
            detector.feed(line)
            fed = fed or bool(line)
        else:
            break

    result = detector.close()

    if not fed or not result.get("confidence"):
        return None

    if encoding := result["encoding"]:
        return encoding.lower()

    return None


def read_lines(
    path: str | pathlib.Path, settings: ReaderSettings | None = None
) -> Iterator[str]:
    """Read an INI file line by line.

    The file is opened before the first line is yielded,
    so a missing file fails on the first call to next().

    Args:
        path: The file to read.
        settings: How to read the file. Defaults to ReaderSettings().

    Yields:
        Each line including its trailing newline (the last line may not have one).

    Raises:
        OSError: The file could not be opened or read.
        EncodingError: The file could not be decoded.
        LineTooLongError: A line was longer than settings.max_line_length.
    """

    if isinstance(path, str):
        path = pathlib.Path(path)

    if settings is None:
        settings = ReaderSettings()

    encoding = settings.encoding
    if encoding is None:
        with path.open("rb") as f:
            encoding = detect_encoding(f)

        if encoding is None:
            _log.warning("could not detect encoding of %s, assuming %s", path, DEFAULT_ENCODING)
            encoding = DEFAULT_ENCODING
        else:
            _log.debug("detected encoding %s for %s", encoding, path)

    limit = settings.max_line_length

    try:
        # Only '\n' ends a line; '\r' is passed through untouched.
        with path.open(encoding=encoding, newline="\n") as f:
            for n, line in enumerate(f, start=1):
                if limit is not None:
                    length = len(line.removesuffix("\n"))
                    if length > limit:
                        raise LineTooLongError(path, n, length, limit)

                yield line
    except (UnicodeDecodeError, LookupError) as e:
        raise EncodingError(f"failed to decode {path} as {encoding}: {e}") from e
