"""Ordered phase runner for browser automation sequences."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Phase:
    """One step of a lookup sequence."""
    name: str
    action: Callable
    fatal: bool = True
    checkpoint: Optional[str] = None  # screenshot name taken after the phase


def run_phases(session, phases: List[Phase]) -> None:
    """
    Run phases in order against a session.

    A fatal phase that raises stops the sequence and the exception
    propagates. An optional phase that raises is logged and skipped.

    Args:
        session: Object passed to each phase action; must provide capture(name)
        phases: Phases in execution order
    """
    for phase in phases:
        logger.debug(f"Phase: {phase.name}")
        try:
            phase.action(session)
        except Exception as e:
            if phase.fatal:
                logger.error(f"Phase '{phase.name}' failed: {e}")
                raise
            logger.warning(f"Phase '{phase.name}' failed, continuing: {e}")

        if phase.checkpoint:
            session.capture(phase.checkpoint)
