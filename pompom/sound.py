"""Completion sound. Strictly best effort."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

log = logging.getLogger(__name__)


def play_sound(sound_path: Path, command: Sequence[str] = ("play", "-q")) -> bool:
    """Start the player on ``sound_path`` without waiting for it.

    Only attempted when both the sound file and the player executable exist.
    Returns True if the player was launched.
    """
    if not command or not sound_path.exists():
        log.debug("No sound to play at %s", sound_path)
        return False
    player = shutil.which(command[0])
    if player is None:
        log.debug("Sound player %r not found", command[0])
        return False
    try:
        subprocess.Popen(
            [player, *command[1:], str(sound_path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        log.debug("Could not play %s: %s", sound_path, exc)
        return False
    return True
