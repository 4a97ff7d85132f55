import logging
from collections import Counter
from datetime import datetime, timedelta

import click
from flask.cli import with_appcontext

from calctech.projects.registry import PROJECTS, get_calculators

logger = logging.getLogger(__name__)

CATEGORY_IDS = [p['id'] for p in PROJECTS if p['type'] == 'category']


@click.group(name='calculators')
def calculators_cli():
    """Calc-Tech site commands."""
    pass


@calculators_cli.command('list')
@click.option('--category', type=click.Choice(CATEGORY_IDS), default=None,
              help='Only list calculators in this category')
def list_command(category):
    """List registered calculators and their URLs."""
    calculators = get_calculators(category)
    for calc in calculators:
        click.echo(f"{calc['parent']:<12} {calc['id']:<24} {calc['url']}")
    click.echo(f"{len(calculators)} calculators.")


@calculators_cli.command('visits')
@click.option('--days', default=7, show_default=True, type=click.IntRange(min=1),
              help='How many days back to count')
@with_appcontext
def visits_command(days):
    """Count page visits per calculator."""
    from calctech.models import LogEntry

    since = datetime.utcnow() - timedelta(days=days)
    entries = LogEntry.query.filter(
        LogEntry.category == 'Visit',
        LogEntry.timestamp >= since,
    ).all()

    if not entries:
        click.echo(f"No visits in the last {days} days.")
        return

    counts = Counter(entry.project for entry in entries)
    for project, count in counts.most_common():
        click.echo(f"{project:<24} {count}")
    click.echo(f"Total: {len(entries)} visits in the last {days} days.")


@calculators_cli.command('prune-visits')
@click.option('--days', required=True, type=click.IntRange(min=1),
              help='Delete visit log entries older than this many days')
@with_appcontext
def prune_visits_command(days):
    """Delete old visit log entries."""
    from calctech import db
    from calctech.models import LogEntry

    cutoff = datetime.utcnow() - timedelta(days=days)
    deleted = LogEntry.query.filter(
        LogEntry.category == 'Visit',
        LogEntry.timestamp < cutoff,
    ).delete(synchronize_session=False)
    db.session.commit()

    logger.info("Pruned %d visit log entries older than %d days", deleted, days)
    click.echo(f"Deleted {deleted} visit log entries older than {days} days.")
