"""Read .env files and turn them into JSON objects."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Mapping

from .builder import kv, mask, obj
from .convert import is_sensitive
from .models import DEFAULT_MASK, JsonObject

logger = logging.getLogger(__name__)

# Matches:  KEY=value  or  KEY="value"  or  KEY='value'
# Handles optional `export` prefix, inline comments stripped.
_PAIR_RE = re.compile(
    r"""^
    (?:export\s+)?          # optional 'export' prefix
    ([A-Za-z_][A-Za-z0-9_]*)   # key
    \s*=\s*                 # equals sign with optional whitespace
    (.*)                    # raw value (quotes stripped below)
    $""",
    re.VERBOSE,
)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape(value: str) -> str:
    """Escape *value* for use inside a JSON string; jsonblob writes text verbatim."""
    out = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch < " ":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _strip_value(raw: str) -> str:
    """Remove surrounding quotes, or a trailing inline comment if unquoted."""
    if raw and raw[0] in ('"', "'"):
        quote = raw[0]
        end = raw.rfind(quote, 1)
        if end > 0:
            return raw[1:end]
        return raw[1:]
    return re.sub(r"\s+#.*$", "", raw).strip()


def parse_env_file(path: str | Path) -> dict[str, str]:
    """Parse a .env file and return a key→value mapping in file order.

    - Comments (#) and blank lines are ignored.
    - Inline comments after unquoted values are stripped.
    - Quoted values have their quotes removed.
    - ``export KEY=value`` syntax is supported.
    - Lines that are not ``KEY=value`` are logged and skipped.

    A missing file yields an empty mapping.
    """
    pairs: dict[str, str] = {}
    file_path = Path(path)
    if not file_path.exists():
        return pairs

    for lineno, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        m = _PAIR_RE.match(stripped)
        if m is None:
            logger.warning("Skipping malformed line %d in %s", lineno, file_path)
            continue
        pairs[m.group(1)] = _strip_value(m.group(2).strip())

    return pairs


def env_to_json_object(
    pairs: Mapping[str, str],
    *,
    sensitive: Callable[[str], bool] = is_sensitive,
    placeholder: str = DEFAULT_MASK,
) -> JsonObject:
    """Build an object of string values, masking keys that look sensitive.

    Values are JSON-escaped here, so the rendered text is always valid JSON.
    """
    replacement = _escape(placeholder)
    members = []
    for key, value in pairs.items():
        text = _escape(value)
        members.append(kv(key, mask(text, replacement) if sensitive(key) else text))
    return obj(members)
