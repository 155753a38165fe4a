from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Protocol

from codebake.config import get_prelude_roots

logger = logging.getLogger(__name__)

PRELUDE_SUFFIX = '.cb'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_files() -> List[Path]:
    """Every prelude source under the configured roots, sorted within each root.

    A root may also name a single file.
    """
    files: List[Path] = []
    for root in get_prelude_roots():
        if root.is_file():
            files.append(root)
        elif root.is_dir():
            files.extend(sorted(root.glob(f'*{PRELUDE_SUFFIX}')))
        else:
            logger.debug("prelude root %s does not exist", root)
    return files


def load_prelude(itp: _HasEvalPrelude) -> None:
    for path in prelude_files():
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
