"""Wires a countdown to the screen, the work log and the completion sound."""

from __future__ import annotations

import logging
from typing import Optional, Union

from pompom import config as cfg
from pompom.clock import Clock
from pompom.display import Asciifier, Renderer, Screen, TerminalScreen
from pompom.models import AppConfig, TimerConfig
from pompom.sound import play_sound
from pompom.timer import Countdown
from pompom.worklog import NullWorkLog, WorkLog

log = logging.getLogger(__name__)


class Application:
    """Runs one pomodoro from start to completion or interruption."""

    def __init__(
        self,
        config: TimerConfig,
        screen: Optional[Screen] = None,
        clock: Optional[Clock] = None,
        app_config: Optional[AppConfig] = None,
    ) -> None:
        self.config = config
        self.app_config = app_config or cfg.load_config()
        self.screen = screen or TerminalScreen()
        self.clock = clock
        self.countdown: Optional[Countdown] = None
        self.worklog: Union[WorkLog, NullWorkLog]
        if config.no_log:
            self.worklog = NullWorkLog()
        else:
            self.worklog = WorkLog(config.log_path or cfg.get_db_path(self.app_config))

    def new_countdown(self) -> Countdown:
        countdown = Countdown(self.config.seconds, self.config.message, clock=self.clock)
        countdown.add_observer(Renderer(self.screen, Asciifier()))
        return countdown

    def run(self) -> bool:
        """Count down to zero. Returns True if completed, False if interrupted."""
        try:
            self.countdown = countdown = self.new_countdown()
            with self.screen:
                self.worklog.start(countdown)
                while not countdown.is_finished():
                    countdown.tick()
        except KeyboardInterrupt:
            if self.countdown is not None:
                log.info("Interrupted with %d seconds left", self.countdown.remaining_seconds)
            self.cleanup()
            return False
        except Exception:
            self.cleanup()
            raise
        finally:
            self.worklog.close()

        self.play_sound()
        return True

    def cleanup(self) -> None:
        """Record the current session as finished early."""
        self.worklog.finish_early()

    def play_sound(self) -> bool:
        return play_sound(cfg.get_sound_path(self.app_config), self.app_config.sound_command)
