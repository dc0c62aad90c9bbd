"""
notifier.py

Best-effort audible cue for each alert. Nothing raised here may reach the pipeline.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import List, Optional

from utils import config


# Players tried in order, with the platform sound each one can play by default
PLAYERS = (
    ("afplay", "/System/Library/Sounds/Glass.aiff"),
    ("paplay", "/usr/share/sounds/freedesktop/stereo/bell.oga"),
    ("aplay", "/usr/share/sounds/alsa/Front_Center.wav"),
)

WINDOWS_SOUND = r"C:\Windows\Media\tada.wav"


class Notifier:
    """
    Plays an alert sound and blocks until playback finishes or ``max_wait``
    elapses. Falls back to the terminal bell when no player is available.
    """

    def __init__(
        self,
        enabled: Optional[bool] = None,
        sound_file: Optional[str] = None,
        poll_interval: float = 0.05,
        max_wait: Optional[float] = None,
    ) -> None:
        self.enabled = config.get("notify.enabled", True) if enabled is None else enabled
        self.sound_file = config.get("notify.sound_file") if sound_file is None else sound_file
        self.poll_interval = poll_interval
        self.max_wait = config.get("notify.max_wait", 5) if max_wait is None else max_wait

    def notify(self) -> None:
        if not self.enabled:
            return
        try:
            if sys.platform.startswith("win"):
                self._play_windows()
            else:
                self._play_posix()
        except Exception:
            pass

    def _play_windows(self) -> None:
        import winsound

        winsound.PlaySound(self.sound_file or WINDOWS_SOUND, winsound.SND_FILENAME)

    def _play_posix(self) -> None:
        command = self._player_command()
        if command is None:
            self._bell()
            return

        process = subprocess.Popen(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        deadline = time.monotonic() + self.max_wait
        try:
            while process.poll() is None and time.monotonic() < deadline:
                time.sleep(self.poll_interval)
        finally:
            if process.poll() is None:
                process.terminate()
                try:
                    process.wait(timeout=1)
                except subprocess.TimeoutExpired:
                    process.kill()
                    process.wait()

    def _player_command(self) -> Optional[List[str]]:
        """First installed player paired with a sound file that exists."""
        for player, default_sound in PLAYERS:
            executable = shutil.which(player)
            if executable is None:
                continue
            sound = self.sound_file or default_sound
            if Path(sound).exists():
                return [executable, str(sound)]
        return None

    @staticmethod
    def _bell() -> None:
        sys.stdout.write("\a")
        sys.stdout.flush()
