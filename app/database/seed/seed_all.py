from flask.cli import with_appcontext
from app.database.seed.seed_processes import seed as seed_processes
from app.database.seed.seed_candidates import seed as seed_candidates
from app.database.seed.seed_candidate_process import seed as seed_candidate_process

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_processes()
    seed_candidates()
    seed_candidate_process()
    click.echo("✅ All seeders completed!")
