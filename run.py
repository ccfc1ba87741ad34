import click

from bookshelf import create_app, db
from bookshelf.services.book_tracking_service import BookTrackingService


app = create_app()


@app.cli.command("init-db")
def init_db():
    with app.app_context():
        db.create_all()

@app.cli.command("drop-db")
def drop_db():
    with app.app_context():
        db.drop_all()

@app.cli.command("reset-db")
def reset_db():
    with app.app_context():
        db.drop_all()
        db.create_all()

@app.cli.command("sync-reading-list")
def sync_reading_list():
    """Re-derive reading-list statuses from stored progress."""
    with app.app_context():
        synced, failed = BookTrackingService().backfill_reading_list()
    click.echo(f"synced={synced} failed={failed}")


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
