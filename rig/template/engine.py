"""Single-pass ``$...$`` template rendering."""
import io
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO, Union

from rig.core import fsutils
from rig.core.errors import PlaceholderMalformed
from rig.core.logger import get_logger
from rig.template.placeholder import ParameterTable, Style, parse

logger = get_logger(__name__)

DELIMITER = "$"
ESCAPE = "\\"


@dataclass(frozen=True)
class Template:
    """A text body and the placeholder grammar it is written in.

    Rendering never fails on placeholders: an unknown key renders as the key
    text and a malformed expression is written back verbatim, delimiters
    included. An opening delimiter that is never closed is plain text.
    """

    style: Style
    body: str

    @classmethod
    def from_file(cls, style: Style, path: Union[str, Path]) -> "Template":
        return cls(style, fsutils.read_text(path))

    def render(self, parameters: ParameterTable, rng: Optional[random.Random] = None) -> str:
        return self.write(io.StringIO(), parameters, rng).getvalue()

    def write(
        self,
        sink: TextIO,
        parameters: ParameterTable,
        rng: Optional[random.Random] = None,
    ) -> TextIO:
        """Scan the body once and write the substituted text to ``sink``."""
        body = self.body
        plain: List[str] = []
        expr: List[str] = []
        inside = False
        pos = 0

        while pos < len(body):
            ch = body[pos]
            # \$ is a literal delimiter, \\ a literal backslash
            if ch == ESCAPE and pos + 1 < len(body) and body[pos + 1] in (DELIMITER, ESCAPE):
                (expr if inside else plain).append(body[pos + 1])
                pos += 2
                continue

            if ch != DELIMITER:
                (expr if inside else plain).append(ch)
            elif not inside:
                sink.write("".join(plain))
                plain.clear()
                inside = True
            else:
                sink.write(self._substitute("".join(expr), parameters, rng))
                expr.clear()
                inside = False
            pos += 1

        if inside:
            plain.append(DELIMITER)
            plain.extend(expr)
        sink.write("".join(plain))
        return sink

    def _substitute(
        self,
        expression: str,
        parameters: ParameterTable,
        rng: Optional[random.Random],
    ) -> str:
        try:
            placeholder = parse(expression, self.style)
        except PlaceholderMalformed as e:
            logger.debug(f"Leaving placeholder untouched ({e})")
            return f"{DELIMITER}{expression}{DELIMITER}"
        return placeholder.format_with(parameters, rng)
