"""
Logging utilities for tracking page visits across the site.

Only the fact that a calculator page was opened is recorded. Calculator
inputs are never written anywhere.
"""

import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from calctech import db
from calctech.models import LogEntry

logger = logging.getLogger(__name__)


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a calculator or category page.

    Args:
        project_name (str): The calculator identifier (e.g., 'bmi', 'subnet')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    if not current_app.config.get('LOG_VISITS', True):
        return

    display_name = project_display_name or project_name

    log_entry = LogEntry(
        project=project_name,
        category='Visit',
        description=f"Anonymous user visited {display_name}"
    )
    try:
        db.session.add(log_entry)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Could not record visit to %s", project_name)


def log_rejected_input(calculator_id, error):
    """Note a rejected calculation. The error message only, never the inputs."""
    logger.info("Rejected input for %s: %s", calculator_id, error)
