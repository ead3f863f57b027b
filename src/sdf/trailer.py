"""Record 3: free-form key/value annotations."""

from collections.abc import Mapping

from container_models.scan_configuration import Dialect, ScanConfiguration

from .data_types import MissingTrailer, SdfArtifact, TrailerEntries
from .encoding import SECTION_DELIMITER, escape, pad_keys, render_section
from .settings import Settings, get_settings


def _writer_entries(settings: Settings) -> dict[str, str]:
    return {
        "WriterName": settings.writer_name,
        "WriterVersion": settings.writer_version,
    }


def _trailer_line(key: str, value: str, comment: str, dialect: Dialect) -> str:
    """
    Render a single trailer line.

    Anything after a ";" is a comment according to ISO 25178-7 section 8.3. This is
    not defined in ISO 25178-71, so comments are dropped for the ISO dialect.
    """
    if dialect is Dialect.ISO:
        tag = key.strip()
        return f"<{tag}> {value.strip()} </{tag}>"
    if comment:
        return f"{key} = {value} ; {comment}"
    return f"{key} = {value}"


def trailer_lines(
    entries: TrailerEntries,
    config: ScanConfiguration,
    comments: Mapping[str, str] | None = None,
) -> list[str]:
    """
    Render the lines of Record 3, without the section delimiter.

    Keys and values are trimmed and the keys are padded to a common width. Unless
    the configuration is relaxed, reserved characters are escaped.

    :param entries: The key/value pairs, rendered in iteration order.
    :param config: The scan configuration, providing the dialect and the mode.
    :param comments: Optional comments per (trimmed) key, legacy dialect only.
    :returns: One line per entry.
    """
    comments = {key.strip(): text.strip() for key, text in (comments or {}).items()}
    lines = []
    for key, value in pad_keys(entries).items():
        comment = comments.get(key.strip(), "")
        if not config.relaxed:
            key, value, comment = escape(key), escape(value), escape(comment)
        lines.append(_trailer_line(key, value, comment, config.dialect))
    return lines


def build_trailer(
    entries: TrailerEntries | None,
    config: ScanConfiguration,
    comments: Mapping[str, str] | None = None,
    missing: MissingTrailer | None = None,
) -> str | None:
    """
    Render Record 3 of a surface data file.

    :param entries: The key/value pairs, or None when there are no annotations.
    :param config: The scan configuration.
    :param comments: Optional comments per key, written in the legacy dialect only.
    :param missing: What to render without entries, defaults to the `missing_trailer` setting.
    :returns: The trailer text, or None when no trailer is to be written.
    """
    settings = get_settings()
    if entries is None:
        missing = missing or settings.missing_trailer
        if missing == MissingTrailer.OMIT:
            return None
        return f"{SECTION_DELIMITER}\n"
    if settings.append_writer_info:
        entries = {**entries, **_writer_entries(settings)}
    return render_section(trailer_lines(entries, config, comments))


def attach_trailer(artifact: SdfArtifact, trailer: str | None) -> SdfArtifact:
    """Return a copy of `artifact` with `trailer` as its Record 3."""
    return artifact.model_copy(update={"trailer": trailer})
