"""Safe subprocess wrappers."""
from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Iterable, Mapping, Optional, Sequence

from ..errors import CommandError

LOGGER = logging.getLogger(__name__)


def run(cmd: Sequence[str] | Iterable[str], **kwargs) -> subprocess.CompletedProcess:
    """Wrapper that defaults to shell=False and raises on failure by default."""
    kwargs.setdefault("shell", False)
    kwargs.setdefault("check", True)
    return subprocess.run(cmd, **kwargs)


def capture(cmd: Sequence[str], env: Optional[Mapping[str, str]] = None) -> str:
    """Run ``cmd`` and return its stdout, raising CommandError on any failure.

    Undecodable bytes survive as surrogates and are restored when the text is
    passed back out as a command argument.
    """
    cmd = list(cmd)
    LOGGER.debug("+ %s", shlex.join(cmd))
    try:
        result = run(cmd, env=env, capture_output=True, text=True, errors="surrogateescape")
    except subprocess.CalledProcessError as exc:
        raise CommandError(cmd, exc.returncode, exc.stderr or "") from exc
    except OSError as exc:
        raise CommandError(cmd, None, str(exc)) from exc
    return result.stdout
