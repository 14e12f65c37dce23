"""Auto-drop timer"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

class DropTimer:
    """
    A single periodic schedule driven by the caller's clock (ms).

    Changing the period cancels the schedule and starts a new one from now.
    poll() fires at most once per call; ticks missed during a stall are
    dropped rather than replayed.
    """
    def __init__(self):
        self.period: Optional[int] = None
        self.next_fire: Optional[int] = None

    def set_period(self, period: Optional[int], now: int) -> bool:
        if period == self.period:
            return False
        self.period = period
        self.next_fire = None if period is None else now + period
        logger.debug('Drop timer rescheduled: period=%s next=%s', period, self.next_fire)
        return True

    def cancel(self):
        self.set_period(None, 0)

    def poll(self, now: int) -> bool:
        if self.next_fire is None or now < self.next_fire:
            return False
        self.next_fire += self.period
        if self.next_fire <= now:
            self.next_fire = now + self.period
        return True

    def drive(self, game, now: int) -> bool:
        """Follow game.drop_interval() and run game.tick() when due."""
        period = game.drop_interval()
        if period is None:
            self.cancel()
            return False
        self.set_period(period, now)
        if self.poll(now):
            game.tick()
            return True
        return False
