"""Idempotent ``base`` patching for ``vite.config.js``.

The patcher guarantees the config declares ``base: '/<repo>/'``:

1. No existing file: render the default template with the base embedded.
2. Existing ``base:`` declarations: rewrite the quoted value on every one.
   A ``base`` key with any other value is left alone and nothing is inserted.
3. Otherwise: insert a declaration after the first ``defineConfig({`` line.

Applying the patch a second time hits branch 2 and is a no-op.
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Literal, Sequence

import structlog

from vite_pages.core.exceptions import (
    AnchorNotFoundError,
    ConfigurationError,
    MalformedTemplateError,
)
from vite_pages.core.models.patch import PatchOutcome, PatchResult
from vite_pages.git.url_resolver import validate_base_path
from vite_pages.utils.text import (
    default_newline,
    join_document,
    leading_whitespace,
    split_document,
)

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "vite.config.js"
BASE_PLACEHOLDER = "{{base_path}}"
DEFAULT_ANCHOR = r"defineConfig\s*\(\s*\{"
DEFAULT_INDENT = "  "

DEFAULT_TEMPLATE = """\
import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'

// https://vitejs.dev/config/
export default defineConfig({
  base: '{{base_path}}',
  plugins: [react()],
})
"""

# ``base`` as a whole key (not ``database``), then a quoted string value.
DECLARATION_RE = re.compile(
    r"(?P<key>(?<![\w$])base\s*:\s*)(?P<quote>['\"])(?P<value>(?:(?!(?P=quote))[^\n])*)(?P=quote)"
)
# Any ``base`` key, whatever its value.
BASE_KEY_RE = re.compile(r"(?<![\w$])base\s*:")

MissingAnchorPolicy = Literal["warn", "fail", "template"]


def render_template(template: str | bytes, base_path: str) -> list[str]:
    """Render the default template into lines with ``base_path`` embedded."""
    if isinstance(template, bytes):
        try:
            template = template.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTemplateError("Config template is not valid UTF-8 text") from e
    if not isinstance(template, str):
        raise MalformedTemplateError(
            f"Config template must be text, got {type(template).__name__}"
        )
    if BASE_PLACEHOLDER not in template:
        raise MalformedTemplateError(
            f"Config template has no {BASE_PLACEHOLDER} placeholder"
        )

    lines, _ = split_document(template.replace(BASE_PLACEHOLDER, base_path))
    declarations = sum(1 for line in lines if DECLARATION_RE.search(line))
    if declarations != 1:
        raise MalformedTemplateError(
            "Config template must declare base exactly once",
            details={"declarations": declarations},
        )
    return lines


def _declaration_line(indent: str, base_path: str) -> str:
    return f"{indent}base: '{base_path}',"


def _insertion_indent(lines: Sequence[str], anchor_index: int) -> str:
    """Indent for a new key: follow the object's first member, else nest one level."""
    anchor_indent = leading_whitespace(lines[anchor_index])
    for line in lines[anchor_index + 1:]:
        if not line.strip():
            continue
        indent = leading_whitespace(line)
        if len(indent) > len(anchor_indent):
            return indent
        break
    return anchor_indent + DEFAULT_INDENT


def patch(
    existing: Sequence[str] | None,
    base_path: str,
    anchor: str = DEFAULT_ANCHOR,
    default_template: str | bytes = DEFAULT_TEMPLATE,
) -> PatchResult:
    """Ensure a config document declares ``base_path`` exactly once.

    ``existing`` is the current file as lines (None when there is no file).
    The input is never mutated; the result carries a new list of lines.
    """
    validate_base_path(base_path)

    if existing is None:
        lines = render_template(default_template, base_path)
        return PatchResult(outcome=PatchOutcome.CREATED, lines=lines, declarations=1)

    original = list(existing)

    def _replace(match: re.Match) -> str:
        quote = match.group("quote")
        return f"{match.group('key')}{quote}{base_path}{quote}"

    patched: list[str] = []
    declarations = 0
    for line in original:
        new_line, count = DECLARATION_RE.subn(_replace, line)
        declarations += count
        patched.append(new_line)

    if declarations:
        return PatchResult(
            outcome=PatchOutcome.REPLACED,
            lines=patched,
            original=original,
            declarations=declarations,
        )

    # A base key with a non-literal value: inserting would add a second key.
    for index, line in enumerate(original):
        if BASE_KEY_RE.search(line):
            return PatchResult(
                outcome=PatchOutcome.UNCHANGED,
                lines=original,
                original=original,
                unrecognized_index=index,
            )

    anchor_re = re.compile(anchor)
    for index, line in enumerate(original):
        if anchor_re.search(line):
            indent = _insertion_indent(original, index)
            lines = original[: index + 1] + [_declaration_line(indent, base_path)] + original[index + 1:]
            return PatchResult(
                outcome=PatchOutcome.INSERTED,
                lines=lines,
                original=original,
                declarations=1,
                anchor_index=index,
            )

    return PatchResult(outcome=PatchOutcome.UNCHANGED, lines=original, original=original)


def _write_atomic(path: Path, text: str) -> None:
    """Write via a sibling temp file so a failed write leaves the original intact."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _patched_endings(result: PatchResult, endings: list[str]) -> list[str]:
    """Line terminators for ``result.lines``, reusing the file's own where possible."""
    if result.outcome != PatchOutcome.INSERTED:
        return list(endings)
    index = result.anchor_index
    anchor_ending = endings[index]
    if anchor_ending:
        return endings[: index + 1] + [anchor_ending] + endings[index + 1:]
    # Anchor was the unterminated last line; the new line takes over that role.
    return endings[:index] + [default_newline(endings), ""] + endings[index + 1:]


def patch_config_file(
    path: str | Path,
    base_path: str,
    on_missing_anchor: MissingAnchorPolicy = "warn",
    anchor: str = DEFAULT_ANCHOR,
    default_template: str | bytes = DEFAULT_TEMPLATE,
) -> PatchResult:
    """Patch a config file on disk, writing only when content changes.

    When an existing file has no anchor line, ``on_missing_anchor`` decides:
    ``warn`` logs and leaves the file, ``fail`` raises
    :class:`AnchorNotFoundError`, ``template`` overwrites the file with the
    rendered default template.

    A ``base`` key whose value is not a string literal is never overwritten:
    ``fail`` raises :class:`ConfigurationError`, other policies log a warning.
    """
    path = Path(path)
    validate_base_path(base_path)

    if path.exists():
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                text = handle.read()
        except UnicodeDecodeError as e:
            raise ConfigurationError(
                f"{path} is not valid UTF-8 text", details={"path": str(path)}
            ) from e
        lines, endings = split_document(text)
        result = patch(lines, base_path, anchor=anchor, default_template=default_template)
    else:
        endings = []
        result = patch(None, base_path, anchor=anchor, default_template=default_template)

    if result.base_unrecognized:
        line = result.lines[result.unrecognized_index]
        if on_missing_anchor == "fail":
            raise ConfigurationError(
                f"base in {path} is not a string literal: {line.strip()}",
                details={"path": str(path), "line": result.unrecognized_index + 1},
            )
        logger.warning(
            "base is not a string literal, leaving it alone",
            path=str(path),
            line=result.unrecognized_index + 1,
        )
        return result

    if result.outcome == PatchOutcome.UNCHANGED:
        if on_missing_anchor == "fail":
            raise AnchorNotFoundError(
                f"No insertion point for base in {path}",
                details={"path": str(path), "anchor": anchor},
            )
        if on_missing_anchor == "template":
            logger.warning("Anchor not found, rewriting config from template", path=str(path))
            result = PatchResult(
                outcome=PatchOutcome.CREATED,
                lines=render_template(default_template, base_path),
                original=result.original,
                declarations=1,
            )
        else:
            logger.warning(
                "Anchor not found, base path not set",
                path=str(path),
                base_path=base_path,
            )
            return result

    if result.outcome == PatchOutcome.CREATED:
        endings = ["\n"] * len(result.lines)
    else:
        endings = _patched_endings(result, endings)

    if result.changed:
        _write_atomic(path, join_document(result.lines, endings))

    logger.info(
        "Vite config patched",
        path=str(path),
        outcome=result.outcome.value,
        changed=result.changed,
    )
    return result
